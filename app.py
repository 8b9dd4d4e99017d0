# === FRONT MATTER ===
# libraries
import pandas as pd
import streamlit as st
import networkx as nx
import matplotlib.pyplot as plt
from io import BytesIO  # to use as buffer for export options
# functions
from conceptmap.input_parser import load_table, parse_df
from conceptmap.graph_helpers import build_graph, layered_positions
from conceptmap.render import render_dot
from conceptmap.report import build_report
from conceptmap.exceptions import ConceptMapError


def load_file(uploaded_file):
    """
    input: csv, json, or excel file
    reads file accordingly; generates error in case of an unsupported file format
    output: pandas dataframe
    """
    file_type = uploaded_file.name.split('.')[-1] #retrieves extension to get the file format
    if file_type not in ["csv", "json", "xlsx"]:
        st.error("Unsupported file type. Upload only excel, csv or json files")
        return None
    try:
        return load_table(uploaded_file, uploaded_file.name)
    except Exception as e:
        st.error(f"Error loading file: {e}")
        return None

# streamlit preview- ui
st.title("Curriculum Planner: Concept Map")

# about app sidebar
with st.sidebar.expander("**About This App**", expanded=True):
    st.markdown("""
    **See what has to come first.**

    Upload a CSV, JSON, or Excel file with one row per concept: its name, a category,
    lecture/lab/hw weights, and the prerequisite concepts separated by `;`. The app:
    - Maps prerequisite chains
    - Computes each concept's earliest start (lecture weeks that must precede it)
    - Totals the curriculum workload per delivery mode
    - Flags duplicate concepts, unknown prerequisites and circular dependencies

    **Ideal For:**
    - Course designers and instructors laying out a syllabus.
    """)


#create tabs for convenience
upload, result, viz = st.tabs(["Upload", "Results", "Visualizations"])
report = None
# === File Upload & Parsing ===
with upload:
    uploaded_file = st.file_uploader("Upload concept file (.csv, .json, or .xlsx)", type= ["csv", "json", "xlsx"])
    if uploaded_file:
        df = load_file(uploaded_file)
        if df is not None:
            # === Preview Dataset Info ===
            st.info(f"**Preview:** ({df.shape[0]} rows x {df.shape[1]} columns)")
            with st.expander("Show full dataset"):
                st.dataframe(df) # gives preview of uploaded data as a table
            st.markdown("---")

            st.markdown("### Parsing input...")
            try:
                records = parse_df(df)
            except ConceptMapError as e: # missing columns, with suggestions
                st.error(str(e))
                st.stop()
            except ValueError as e: # non-numeric weights
                st.error(str(e))
                st.stop()
            report = build_report(records)
            st.success(f"Successfully parsed {len(records)} records!")

            # === Diagnostics: treated as warnings ===
            errors = report.errors()
            if errors:
                st.warning(f"Problems in the concept file:\n\n{errors}")

# === Results ===
with result:
    if report is not None:
        rows = []
        for c in report.concepts:
            rows.append({
                "Concept" : c.name,
                "Category" : c.category,
                "Lecture" : round(c.modes.lecture.weight, 2),
                "Lab" : round(c.modes.lab.weight, 2),
                "HW" : round(c.modes.hw.weight, 2),
                "Prerequisites" : "; ".join(c.dependencies),
                "Earliest Start" : None if c.earliest_start is None else round(c.earliest_start, 2),
            })
        summary_df = pd.DataFrame(rows)
        st.dataframe(summary_df)

        totals = report.totals
        c1, c2, c3 = st.columns(3)
        c1.metric("Lecture (weeks)", f"{totals.lecture:.2f}")
        c2.metric("Lab (weeks)", f"{totals.lab:.2f}")
        c3.metric("HW (weeks)", f"{totals.hw:.2f}")

        if report.acyclic:
            st.info(
                "The **earliest start** of a concept is the total lecture weight of all of its "
                "prerequisites, direct and indirect."
            )
        else:
            st.error(
                f"{len(report.pending)} concepts are part of (or depend on) a circular dependency; "
                "their earliest start cannot be computed."
            )

# === Visualizations ===
with viz:
    if report is not None:
        G = build_graph(report)
        categories = report.categories()
        cmap = plt.get_cmap("tab20")
        colors = {cat: cmap(i % cmap.N) for i, cat in enumerate(categories)}
        pos = layered_positions(G, report.order)
        fig, ax = plt.subplots(figsize = (10, 6), facecolor = "whitesmoke")
        ax.set_facecolor("whitesmoke")
        nx.draw(
                G,
                pos,
                labels= nx.get_node_attributes(G, "label"),
                node_color= [colors[G.nodes[n]["category"]] for n in G.nodes],
                edge_color= "#64B5F6",
                node_size= 1500,
                font_size= 7,
                font_color= "#1a1a1a",
                ax= ax
                )
        ax.set_title("Concept Map (prerequisites on the left)")
        st.pyplot(fig)
        # export option
        buffer = BytesIO()
        fig.savefig(buffer, format="png", bbox_inches="tight")
        st.download_button(
            label="Download Chart as PNG",
            data=buffer.getvalue(),
            file_name="concept_map.png",
            mime="image/png"
        )
        # --- Category Legend ---
        with st.expander("Legend"):
            st.dataframe(pd.DataFrame({"Category": [c or "uncategorized" for c in categories]}))

        # --- DOT export for graphviz ---
        try:
            dot = render_dot(report)
        except ConceptMapError as e: # too many categories for the palette
            st.error(str(e))
        else:
            st.download_button(
                label="Download Graphviz DOT",
                data=dot,
                file_name="concept_map.dot",
                mime="text/vnd.graphviz"
            )
