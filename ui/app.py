import streamlit as st

from gjstep.catalog import Catalog
from gjstep.config import CATALOG_PATH
from gjstep.parsing import parse_matrix
from gjstep.solver import GaussJordan
from gjstep.types import ParseError, copy_matrix
from gjstep.verify import sanity_checks
from gjstep.viewer import LogViewer

st.set_page_config(page_title="Gauss-Jordan Steps", page_icon="🧮", layout="centered")
st.title("Gauss-Jordan Solver 🧮")

catalog = Catalog.from_file(CATALOG_PATH)

with st.sidebar:
    st.markdown("### Example systems")
    names = ["(type my own)"] + [s.id for s in catalog.systems]
    pick = st.selectbox("Load", names, index=0)
    st.markdown("---")
    st.markdown("Cells accept decimals or fractions like `-3/4`. Blank means 0.")

if pick != "(type my own)":
    entry = catalog.get(pick)
    rows, cols = entry.rows, entry.cols
    defaults = [[str(v) for v in row] for row in entry.cells]
else:
    size = st.radio("System size", ["2x3", "3x4"], horizontal=True)
    rows, cols = (2, 3) if size == "2x3" else (3, 4)
    defaults = [[""] * cols for _ in range(rows)]

cells = []
for i in range(rows):
    columns = st.columns(cols)
    row = []
    for j in range(cols):
        label = f"b[{i + 1}]" if j == cols - 1 else f"A[{i + 1},{j + 1}]"
        row.append(columns[j].text_input(label, value=defaults[i][j], key=f"{pick}-{i}-{j}"))
    cells.append(row)

if st.button("Solve", type="primary"):
    try:
        original = parse_matrix(cells, rows, cols)
    except ParseError as e:
        st.error(str(e))
        st.stop()
    res = GaussJordan().solve(copy_matrix(original), rows, cols)
    st.session_state["lines"] = res.lines()
    st.session_state["top"] = 0
    st.session_state["ok"] = res.ok
    st.session_state["checks"] = sanity_checks(res, original)

if "lines" in st.session_state:
    viewer = LogViewer(st.session_state["lines"])
    viewer.top = st.session_state.get("top", 0)

    if st.session_state["ok"]:
        st.success("Finished Gauss-Jordan.")
    else:
        st.error("Singular / underdetermined system.")

    b1, b2, b3, b4 = st.columns(4)
    if b1.button("⇞ Page up"):
        viewer.page_up()
    if b2.button("↑ Up"):
        viewer.up()
    if b3.button("↓ Down"):
        viewer.down()
    if b4.button("⇟ Page down"):
        viewer.page_down()
    st.session_state["top"] = viewer.top

    st.markdown(f"**{viewer.title}**")
    st.code("\n".join(viewer.visible()), language="text")
    st.caption(viewer.footer())

    with st.expander("Checks"):
        st.json(st.session_state["checks"])
