#!/usr/bin/env python
# coding: utf-8

"""
Grayify - Image to Grayscale Converter
Main entry point
"""

import streamlit as st

from image_io import guess_mime_type
from session import GrayifySession, ViewState
from settings import ACCEPTED_EXTENSIONS, configure_logging, load_settings

FEATURES = [
    ("🎨", "Smart Conversion", "Uses professional luminance formula for accurate grayscale"),
    ("⚡", "Lightning Fast", "Real-time processing right where the app runs"),
    ("📱", "Mobile Friendly", "Works on all devices and screen sizes"),
    ("🔒", "Privacy First", "Images are never stored - everything stays in your session"),
]

# ---------- Page config & theming ----------
st.set_page_config(
    page_title="Grayify",
    page_icon="🎨",
    layout="wide",
)

st.markdown(
    """
    <style>
    header {
        display: none !important;
    }
    div[data-testid="stToolbar"] {
        display: none !important;
    }
    .stApp {background: linear-gradient(180deg, #4b5563 0%, #6b7280 50%, #9ca3af 100%) !important;}
    .app-title {
        font-size: 3rem;
        font-weight: 800;
        letter-spacing: 1px;
        color: #ffffff;
        text-shadow: 2px 2px 4px rgba(0,0,0,0.2);
    }

    /* Buttons */
    .stDownloadButton>button, .stButton>button {
        border-radius: 12px;
        font-weight: 600;
        font-size: 1.1rem;
        transition: all 0.3s ease;
        box-shadow: 0 4px 6px rgba(0,0,0,0.1);
    }
    .stDownloadButton>button:hover, .stButton>button:hover {
        transform: translateY(-2px);
        box-shadow: 0 6px 12px rgba(0,0,0,0.15);
    }

    /* Upload area */
    [data-testid="stFileUploader"] {
        background: rgba(255,255,255,0.5);
        border-radius: 15px;
        padding: 1rem !important;
        border: 2px dashed #374151;
        transition: all 0.3s ease;
    }
    [data-testid="stFileUploader"]:hover {
        background: rgba(255,255,255,0.8);
        border-color: #111827;
    }

    /* Center images and constrain size */
    [data-testid="stImage"] {
        display: flex;
        justify-content: center;
    }

    .feature-grid {
        display: grid;
        grid-template-columns: repeat(auto-fit, minmax(220px, 1fr));
        gap: 1.5rem;
        margin: 1rem auto;
        max-width: 1000px;
    }
    .feature-card {
        background: rgba(255,255,255,0.9);
        padding: 1.5rem;
        border-radius: 20px;
        box-shadow: 0 8px 20px rgba(0,0,0,0.15);
        text-align: center;
    }
    .feature-icon {font-size: 3rem; margin-bottom: 0.5rem;}
    .feature-title {font-size: 1.3rem; font-weight: 700; color: #111827;}
    .feature-desc {font-size: 1rem; color: #374151; line-height: 1.5;}
    .foot {font-size: 0.85rem; color: #f3f4f6; text-align: center; margin-top: 3rem;}

    .stAlert {
        border-radius: 12px;
        font-size: 1.05rem;
    }
    </style>
    """,
    unsafe_allow_html=True,
)

# ---------- Settings & session state ----------
try:
    settings = load_settings()
except ValueError as exc:
    st.error(f"Invalid configuration: {exc}")
    st.stop()

configure_logging(settings)

if "grayify" not in st.session_state:
    st.session_state.grayify = GrayifySession(settings)
if "uploader_key" not in st.session_state:
    st.session_state.uploader_key = 0

session: GrayifySession = st.session_state.grayify


def format_size(size_bytes):
    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.2f} KB"
    else:
        return f"{size_bytes / (1024 * 1024):.2f} MB"


# ---------- Header ----------
st.markdown('<div class="app-title" style="text-align: center; padding: 0.5rem 0;">🎨 Grayify</div>', unsafe_allow_html=True)

if session.show_features and not session.has_result:
    cards = "".join(
        f'<div class="feature-card"><div class="feature-icon">{icon}</div>'
        f'<div class="feature-title">{title}</div><div class="feature-desc">{desc}</div></div>'
        for icon, title, desc in FEATURES
    )
    st.markdown(f'<div class="feature-grid">{cards}</div>', unsafe_allow_html=True)

# ---------- Upload ----------
st.subheader("Transform Your Images")
uploaded = st.file_uploader(
    f"Click to upload or drag and drop - JPG, PNG, GIF, BMP, WebP (Max: {settings.max_upload_mb:g}MB)",
    type=ACCEPTED_EXTENSIONS,
    key=f"upload_{st.session_state.uploader_key}",
)

if uploaded is not None:
    if session.is_new_upload(uploaded.file_id):
        progress = st.progress(0, text="Processing image...")
        shown = {"pct": -1}

        def _on_progress(value):
            pct = int(value)
            if pct != shown["pct"]:
                shown["pct"] = pct
                progress.progress(pct, text=f"Processing image... {pct}%")

        with st.spinner("Processing image..."):
            session.submit(
                uploaded.name,
                uploaded.type or guess_mime_type(uploaded.name),
                uploaded.getvalue(),
                on_progress=_on_progress,
                upload_id=uploaded.file_id,
            )
        progress.empty()

if session.state == ViewState.ERROR and session.error:
    st.error(session.error)

# ---------- Results ----------
if session.has_result:
    outcome = session.outcome
    st.caption(f"📐 {outcome.width}×{outcome.height} • ⏱️ {outcome.elapsed_ms:.0f} ms")
    col_left, col_right = st.columns(2, gap="large")

    with col_left:
        st.markdown("**Original Image**")
        st.image(outcome.original_preview, use_container_width=True)
        st.caption(f"📦 Size: {format_size(session.original.size)}")
        st.download_button(
            "💾 Download Original",
            data=session.original.data,
            file_name=session.original.filename,
            mime=session.original.mime_type,
            use_container_width=True,
        )

    with col_right:
        st.markdown("**Grayscale Image**")
        st.image(outcome.grayscale_preview, use_container_width=True)
        st.caption(f"📦 Size: {format_size(session.grayscale.size)}")
        st.download_button(
            "🎨 Download Grayscale",
            data=session.grayscale.data,
            file_name=session.grayscale.filename,
            mime=session.grayscale.mime_type,
            use_container_width=True,
        )

    col1, col2, col3 = st.columns([1, 1, 1])
    with col2:
        if st.button("🔄 Upload New Image", use_container_width=True):
            session.reset()
            st.session_state.uploader_key += 1
            st.rerun()
else:
    st.markdown(
        '<p style="text-align: center; color: white; font-size: 1.1rem; margin-top: 2rem;">'
        "Transform your colorful images into stunning grayscale masterpieces ✨<br>"
        '<span style="font-size: 0.9rem;">Simply upload an image above to get started</span></p>',
        unsafe_allow_html=True,
    )

st.markdown('<div class="foot">Grayify • Transform your images into grayscale</div>', unsafe_allow_html=True)
