"""Streamlit UI for TreeArt."""

from __future__ import annotations

import logging

import streamlit as st

from TreeArt.markdown_renderer import render_markdown
from TreeArt.renderer import render
from TreeArt.tree_builder import build_tree, parse_path_input

logger = logging.getLogger(__name__)

_PREVIEW_MAX_LINES = 1000

_EXAMPLE_PATHS = "src/main.py\nsrc/utils.py\ntests/test_main.py\nREADME.md"


def _qp(key: str, default: str = "") -> str:
    """Read a query parameter, returning *default* if absent."""
    params = st.query_params
    return params.get(key, default)


def main() -> None:
    st.set_page_config(
        page_title="TreeArt",
        page_icon="🌳",
        layout="wide",
    )

    st.title("TreeArt")
    st.caption("Draw a list of paths as a box-drawing tree.")

    root_label = st.text_input("Root label", value=_qp("root", "."))
    raw = st.text_area(
        "Paths (one per line or comma-separated)",
        value=_qp("paths", _EXAMPLE_PATHS),
        height=240,
    )

    paths = parse_path_input(raw)
    if not paths:
        st.info("Enter at least one path to draw a tree.")

    if st.button("Render", type="primary", use_container_width=True):
        try:
            tree = build_tree(paths, root=root_label or ".")
            st.session_state["result"] = {
                "text": render(tree),
                "markdown": render_markdown(root_label or "Tree", tree),
            }
        except Exception as exc:
            logger.warning("Rendering failed: %s", exc)
            st.error(f"Unexpected error: {exc}")
            return

    # Show the last result after reruns (e.g. download button click)
    if "result" in st.session_state:
        _show_result(st.session_state["result"])


def _show_result(result: dict) -> None:
    """Display the preview and download buttons for a stored result."""
    text_output = result["text"]

    left, right = st.columns(2)
    with left:
        st.download_button(
            label="Download text",
            data=text_output,
            file_name="tree.txt",
            mime="text/plain",
            use_container_width=True,
        )
    with right:
        st.download_button(
            label="Download Markdown",
            data=result["markdown"],
            file_name="tree.md",
            mime="text/markdown",
            use_container_width=True,
        )

    preview_lines = text_output.splitlines()
    if len(preview_lines) > _PREVIEW_MAX_LINES:
        st.code("\n".join(preview_lines[:_PREVIEW_MAX_LINES]), language="text")
        st.caption(
            f"Preview is truncated to {_PREVIEW_MAX_LINES:,} lines "
            f"(total {len(preview_lines):,} lines). "
            "Download the file for the full tree."
        )
    else:
        st.code(text_output, language="text")


if __name__ == "__main__":
    main()
