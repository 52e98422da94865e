# Streamlit search page (talks to the FastAPI backend)
# run: streamlit run trainlog_search/search_ui.py

import requests
import streamlit as st

from trainlog_search.config import API_URL

st.set_page_config(page_title="TrainLog Exercise Search", layout="wide")


@st.cache_data(ttl=300)
def fetch_facets():
    resp = requests.get(f"{API_URL}/facets", timeout=10)
    resp.raise_for_status()
    return resp.json()


def _options(facets, name):
    return {row["label"]: row["value"] for row in facets.get(name, [])}


try:
    facets = fetch_facets()
except requests.RequestException as e:
    st.error(f"❌ Error calling API: {e}")
    st.stop()

# ---- Sidebar ----
with st.sidebar:
    st.header("Filters")

    groups = _options(facets, "muscle_group")
    equipment = _options(facets, "equipment")
    patterns = _options(facets, "pattern")

    picked_groups = st.multiselect("Muscle group", list(groups))
    picked_equipment = st.multiselect("Equipment", list(equipment))
    picked_patterns = st.multiselect("Pattern", list(patterns))

    st.divider()
    limit = st.slider("Max results", 1, 50, 20)
    show_scores = st.checkbox("Show scores", value=True)

# ---- Main ----
st.title("Exercise Search")

query = st.text_input("種目名で検索", placeholder="ベンチ / bench / ﾍﾞﾝﾁ ...")

payload = {
    "query": query,
    "limit": limit,
    "muscle_group": [groups[g] for g in picked_groups],
    "equipment": [equipment[e] for e in picked_equipment],
    "pattern": [patterns[p] for p in picked_patterns],
}

try:
    resp = requests.post(f"{API_URL}/search", json=payload, timeout=30)
    resp.raise_for_status()
    data = resp.json()
except requests.RequestException as e:
    st.error(f"❌ Error calling API: {e}")
    st.stop()

results = data.get("results", [])
group_labels = {v: k for k, v in groups.items()}
if not results:
    st.info("No matching exercises.")

for row in results:
    title = f"**{row['name']}**"
    if row.get("nameEn"):
        title += f"  ·  {row['nameEn']}"
    if show_scores and query.strip():
        title += f"  `score {row['score']}`"
    st.markdown(title)
    st.caption(f"{group_labels.get(row['muscleGroup'], row['muscleGroup'])} · {row['equipment']} · {row['pattern']}")
