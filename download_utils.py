import streamlit as st

from export_utils import bundle_zip


def render_download_section(paths, context_key: str, zip_name: str = None):
    """
    Render a simple download section with one button for all exported files.
    Must be called while the files still exist; they are read into memory here.
    """
    if not paths:
        return

    # Create ZIP buffer
    buf = bundle_zip(paths)

    st.caption(", ".join(p.name for p in paths))

    # Show download button
    st.download_button(
        label="⬇️ Download alle Dateien als ZIP",
        data=buf,
        file_name=zip_name or f"export_{context_key}.zip",
        mime="application/zip",
        key=f"zip_download_{context_key}",
    )
