# app.py
import streamlit as st
import pandas as pd

from leadscraper.config import config
from leadscraper.geo import locate_by_ip
from leadscraper.io import csv_filename, leads_to_csv
from leadscraper.state import AppState, Status, run_search
from leadscraper.types import LEAD_COLUMNS


# ----------------------------
# Page config
# ----------------------------
st.set_page_config(
    page_title=f"LeadScrapper {config.LEADS_COUNTRY}",
    layout="wide",
    initial_sidebar_state="collapsed",
)

# ----------------------------
# Dark purple / glass UI
# ----------------------------
THEME_CSS = """
<style>
@import url('https://fonts.googleapis.com/css2?family=Poppins:wght@400;600;700&display=swap');

/* Hide Streamlit chrome */
#MainMenu {visibility: hidden;}
header {visibility: hidden;}
footer {visibility: hidden;}

:root{
  --ink-1: rgba(255,255,255,0.95);
  --ink-2: rgba(221,214,254,0.60);
  --purple-1: rgba(147,51,234,1);
  --purple-2: rgba(168,85,247,1);
  --field-bg: rgba(255,255,255,0.05);
  --border-soft: rgba(255,255,255,0.10);
}

.stApp {
  background: #1a0b2e;
  font-family: 'Poppins', sans-serif;
}
.stApp, .stApp p, .stApp li, .stApp label, .stApp span, .stApp div {
  color: var(--ink-1);
}
.ls-sub, .stCaption, .stMarkdown p {
  color: var(--ink-2);
}

.ls-wrap {
  max-width: 1100px;
  margin: 0 auto;
  padding: 28px 18px 60px 18px;
  text-align: center;
}
.ls-pill {
  display: inline-flex;
  gap: 8px;
  padding: 6px 16px;
  border-radius: 999px;
  background: rgba(168,85,247,0.10);
  border: 1px solid rgba(168,85,247,0.20);
  color: rgba(216,180,254,1) !important;
  font-size: 14px;
  font-weight: 600;
}
.ls-title {
  font-size: 52px;
  font-weight: 700;
  line-height: 1.1;
  margin: 18px 0 12px 0;
  background: linear-gradient(90deg, #ffffff, #e9d5ff, #c084fc);
  -webkit-background-clip: text;
  -webkit-text-fill-color: transparent;
}
.ls-sub {
  font-size: 18px;
  max-width: 680px;
  margin: 0 auto 28px auto;
}

/* Buttons */
div[data-testid="stButton"] > button,
div[data-testid="stDownloadButton"] > button {
  width: 100%;
  border-radius: 14px !important;
  font-weight: 600 !important;
  border: 1px solid var(--border-soft) !important;
  background: rgba(255,255,255,0.05) !important;
  color: var(--ink-1) !important;
}
div[data-testid="stButton"] > button[kind="primary"] {
  background: var(--purple-1) !important;
  border: 1px solid var(--purple-2) !important;
}
div[data-testid="stButton"] > button:hover {
  transform: translateY(-1px);
}

/* Inputs */
div[data-testid="stTextInput"] input {
  background: var(--field-bg) !important;
  color: var(--ink-1) !important;
  border: 1px solid var(--border-soft) !important;
  border-radius: 14px !important;
}
div[data-testid="stTextInput"] input::placeholder {
  color: rgba(255,255,255,0.30) !important;
}

div[data-testid="stAlert"] {
  border-radius: 14px !important;
}
</style>
"""
st.markdown(THEME_CSS, unsafe_allow_html=True)


# ----------------------------
# Helpers
# ----------------------------
def _state() -> AppState:
    if "app_state" not in st.session_state:
        state = AppState()
        # one lookup per session; None just means "no location hint"
        state.coords = locate_by_ip()
        st.session_state["app_state"] = state
    return st.session_state["app_state"]


def _leads_df(state: AppState) -> pd.DataFrame:
    df = pd.DataFrame([l.__dict__ for l in state.leads], columns=list(LEAD_COLUMNS))
    return df.fillna("")


# ----------------------------
# Session init
# ----------------------------
state = _state()

missing = config.validate()
if missing:
    st.warning(f"Configuración incompleta: {', '.join(missing)}")


# ----------------------------
# Hero
# ----------------------------
st.markdown('<div class="ls-wrap">', unsafe_allow_html=True)
st.markdown(
    f"""
    <div class="ls-pill">🏢 LeadScrapper {config.LEADS_COUNTRY} v2.0</div>
    <div class="ls-title">Encuentra Leads Comerciales<br/>en {config.LEADS_COUNTRY}</div>
    <div class="ls-sub">
      Automatiza tu prospección de ventas extrayendo datos precisos de Google Maps.
      Diseñado específicamente para el mercado local.
    </div>
    """,
    unsafe_allow_html=True,
)

# ----------------------------
# Search form
# ----------------------------
c1, c2, c3 = st.columns([3, 3, 2], vertical_alignment="bottom")
with c1:
    state.business_type = st.text_input(
        "¿Qué buscas?",
        key="business_type",
        placeholder="¿Qué buscas? (Ej: Dentistas)",
        label_visibility="collapsed",
    )
with c2:
    state.location = st.text_input(
        "¿Dónde?",
        key="location",
        placeholder="¿Dónde? (Ej: Chacao, Caracas)",
        label_visibility="collapsed",
    )
with c3:
    run = st.button("🔍 Extraer Leads", type="primary", use_container_width=True, key="run_search")

if run:
    with st.spinner("Buscando…"):
        run_search(state, more=False)
    st.rerun()

st.markdown("</div>", unsafe_allow_html=True)  # ls-wrap


# ----------------------------
# Error banner
# ----------------------------
if state.status == Status.ERROR and state.error:
    st.error(state.error)


# ----------------------------
# Results
# ----------------------------
if state.leads:
    hL, hR = st.columns([5, 3], vertical_alignment="center")
    with hL:
        st.markdown(f"### Resultados ({len(state.leads)})")
        st.caption("Datos extraídos en tiempo real")
    with hR:
        d1, d2 = st.columns(2)
        with d1:
            st.download_button(
                "⬇️ Exportar CSV",
                data=leads_to_csv(state.leads).encode("utf-8"),
                file_name=csv_filename(state.business_type, state.location),
                mime="text/csv",
                use_container_width=True,
                disabled=not state.can_download,
            )
        with d2:
            more = st.button(
                "➕ Cargar más",
                use_container_width=True,
                key="load_more",
                disabled=not state.can_load_more,
            )
            if more:
                with st.spinner("Buscando más…"):
                    run_search(state, more=True)
                st.rerun()

    st.dataframe(
        _leads_df(state),
        hide_index=True,
        use_container_width=True,
        column_config={
            "name": st.column_config.TextColumn("Negocio"),
            "rating": st.column_config.TextColumn("Calificación"),
            "reviews": st.column_config.TextColumn("Reseñas"),
            "address": st.column_config.TextColumn("Dirección"),
            "phone": st.column_config.TextColumn("Teléfono"),
            "url": st.column_config.LinkColumn("Mapa", display_text="Ver en Maps"),
        },
    )

elif state.status != Status.ERROR:
    st.info("Ingresa un tipo de negocio y una ubicación para comenzar.")
