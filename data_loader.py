# data_loader.py
import pandas as pd
import streamlit as st


def _coerce_numeric(df: pd.DataFrame) -> pd.DataFrame:
    """Convert text columns holding numbers (also with decimal comma) to floats."""
    for col in df.columns:
        if pd.api.types.is_numeric_dtype(df[col]):
            continue
        text = df[col].astype(str).str.strip().str.replace(",", ".", regex=False)
        converted = pd.to_numeric(text, errors="coerce")
        # keep real text columns (labels, names) as they are
        if converted.notna().sum() >= max(1, df[col].notna().sum() // 2):
            df[col] = converted
    return df


@st.cache_data(show_spinner=False)
def load_table(file):
    """
    Load a CSV or Excel file into a DataFrame for plotting.

    Args:
        file: path or uploaded file-like object (.csv, .txt, .xlsx, .xls)

    Returns:
        DataFrame with numeric columns converted; empty on failure.
    """
    name = str(getattr(file, "name", file)).lower()
    try:
        if name.endswith((".xlsx", ".xls")):
            df = pd.read_excel(file)
        else:
            # sniff the separator (comma, semicolon, tab)
            df = pd.read_csv(file, sep=None, engine="python")

        df = df.dropna(axis=1, how="all").dropna(axis=0, how="all")
        if df.empty:
            st.error("⚠️ Keine Daten in der Datei gefunden.")
            return pd.DataFrame()

        df.columns = [str(c).strip() for c in df.columns]
        return _coerce_numeric(df).reset_index(drop=True)

    except Exception as e:
        st.error(f"⚠️ Fehler beim Laden der Datei: {e}")
        return pd.DataFrame()


def numeric_columns(df: pd.DataFrame):
    return [c for c in df.columns if pd.api.types.is_numeric_dtype(df[c])]
