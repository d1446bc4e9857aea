# -----------------------------------------------------------------------------
# Streamlit Frontend for the GJSTEP API
# Purpose:
#   Thin client: (1) browse catalog systems, (2) send cells to /solve, and
#   (3) render the transcript, solution and checks returned by the API.
#---------------------------------------------------------------------------

import json, requests, streamlit as st

# API_URL comes from the environment or a local .env (local/remote backends)
from gjstep.config import API_URL

st.set_page_config(page_title="GJSTEP API Client", page_icon="🧮", layout="centered")
st.title("Gauss-Jordan API Client 🧮")

# ---------------- Sidebar: Catalog Explorer -----------------------------------
system_id = None
with st.sidebar:
    st.subheader("Example systems")
    r = requests.get(f"{API_URL}/catalog")
    if r.status_code == 200:
        data = r.json()
        st.caption(f"{data['count']} systems")
        ids = [""] + [it["id"] for it in data["items"]]
        system_id = st.selectbox("Solve a catalog system", ids) or None
    else:
        st.error(f"Catalog error: {r.text}")

# ---------------- Main Form: cells as text ------------------------------------
with st.form("mform"):
    size = st.radio("System size", ["2x3", "3x4"], horizontal=True)
    text = st.text_area("Rows (one per line, cells separated by spaces)", height=120,
                        value="2 1 1 5\n1 3 2 10\n1 0 0 2")
    max_lines = st.number_input("Max transcript lines", min_value=1, value=280)
    submit = st.form_submit_button("Solve")

if submit:
    if system_id:
        payload = {"system_id": system_id, "max_lines": int(max_lines)}
    else:
        rows, cols = (2, 3) if size == "2x3" else (3, 4)
        cells = [line.split() for line in text.strip().splitlines()]
        payload = {"rows": rows, "cols": cols, "cells": cells, "max_lines": int(max_lines)}

    with st.spinner("Solving..."):
        r2 = requests.post(f"{API_URL}/solve", json=payload)
    if r2.status_code != 200:
        st.error(f"Solve error: {r2.text}")
        st.stop()

    res = r2.json()
    if res["ok"]:
        st.success("x = [" + ", ".join(res["solution_display"]) + "]")
    else:
        st.error(f"Singular at column {res['singular_column'] + 1}")
    if res.get("truncated"):
        st.warning(f"Transcript truncated at {res['count']} lines.")

    st.subheader("Steps")
    st.code("\n".join(res["lines"]), language="text")
    with st.expander("Checks"):
        st.json(res.get("checks", {}))
    with st.expander("Trace"):
        st.code(json.dumps(res.get("trace", []), indent=2))
