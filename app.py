# app.py
import hashlib
import tempfile
import warnings
from pathlib import Path

import matplotlib.pyplot as plt
import streamlit as st

# Your modules
from config import DEFAULT_PAPER_SIZE_CM
from data_loader import load_table, numeric_columns
from download_utils import render_download_section
from errors import FigExportError, MultiAxisAdvisory
from figexp import export_figure
from helpers import parse_line_widths, sanitize_filename
from plots import plot_table


# =========================
# Page settings
# =========================
st.set_page_config(page_title="Figure Export", layout="wide")
st.title("📐 Figure Export – PDF + TikZ")


# =========================
# Helpers
# =========================
def _file_hash(uploaded_file) -> str:
    """Hash file content efficiently in chunks."""
    if not uploaded_file:
        return ""
    pos = uploaded_file.tell()
    sha1 = hashlib.sha1()
    for chunk in iter(lambda: uploaded_file.read(8192), b""):
        sha1.update(chunk)
    uploaded_file.seek(pos)
    return sha1.hexdigest()[:10]


# =========================
# Sidebar controls
# =========================
with st.sidebar:
    st.subheader("🔧 Steuerung")

    uploaded_file = st.file_uploader("Daten hochladen", type=["csv", "txt", "xlsx"])
    fmt = st.selectbox("Format", ["tikz", "tex", "pdf", "png", "svg"], index=0)
    title = st.text_input("Titel", value="")
    separate_axes = st.checkbox("Eine Achse pro Spalte", value=False)
    grid = st.checkbox("Gitter", value=True)

    st.markdown("**Papiergröße (cm)**")
    width_cm = st.number_input("Breite", min_value=1.0, value=DEFAULT_PAPER_SIZE_CM[0], step=0.5)
    height_cm = st.number_input("Höhe", min_value=1.0, value=DEFAULT_PAPER_SIZE_CM[1], step=0.5)
    font_size = st.number_input("Schriftgröße (0 = unverändert)", min_value=0, value=0, step=1)
    line_width_text = st.text_input("Linienbreite(n)", value="", help="z.B. 2 oder 1, 2, 3")

    start_export = st.button("Export starten")


# =========================
# Main
# =========================
if not uploaded_file:
    st.info("Bitte laden Sie eine CSV- oder Excel-Datei hoch.")
    st.stop()

df = load_table(uploaded_file)
if df.empty:
    st.error("⚠️ Die hochgeladene Datei enthält keine gültigen Daten.")
    st.stop()

columns = numeric_columns(df)
if len(columns) < 2:
    st.warning("Mindestens zwei numerische Spalten werden benötigt.")
    st.stop()

x_col = st.selectbox("x-Spalte", columns, index=0)
y_cols = st.multiselect("y-Spalten", [c for c in columns if c != x_col],
                        default=[c for c in columns if c != x_col][:1])
if not y_cols:
    st.info("Bitte mindestens eine y-Spalte wählen.")
    st.stop()

fig = plot_table(
    df, x_col, y_cols,
    separate_axes=separate_axes,
    title=title,
    grid=grid,
    size_cm=(width_cm, height_cm),
)
try:
    st.pyplot(fig, clear_figure=False)

    if start_export:
        try:
            line_width = parse_line_widths(line_width_text)
        except ValueError:
            st.error(f"⚠️ Ungültige Linienbreite: {line_width_text}")
            st.stop()

        name = sanitize_filename(title or Path(uploaded_file.name).stem, ext=f".{fmt}")
        context_key = f"{_file_hash(uploaded_file)}_{fmt}"

        with tempfile.TemporaryDirectory() as tmp:
            try:
                with warnings.catch_warnings(record=True) as caught:
                    warnings.simplefilter("always", MultiAxisAdvisory)
                    result = export_figure(
                        Path(tmp) / name,
                        fig,
                        paper_size=(width_cm, height_cm),
                        font_size=font_size,
                        line_width=line_width,
                    )
            except FigExportError as e:
                st.error(f"⚠️ Export fehlgeschlagen: {e}")
                st.stop()

            for w in caught:
                st.info(str(w.message))

            if isinstance(result, list):
                paths = [p for pair in result for p in (pair.graphics, pair.markup)]
            else:
                paths = [result]

            st.markdown("### ⬇️ Download")
            render_download_section(paths, context_key=context_key, zip_name=f"{Path(name).stem}.zip")
finally:
    # the figure is rebuilt on every rerun
    plt.close(fig)
