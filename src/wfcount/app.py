# app.py — Streamlit viewer for word counts
# Run:  streamlit run src/wfcount/app.py

from __future__ import annotations

from typing import Dict, List

import streamlit as st

from wfcount.cli import SAMPLE_TEXT
from wfcount.counter import total_words, word_frequency
from wfcount.report import format_lines

def _rows(freq: Dict[str, int]) -> List[Dict[str, object]]:
    return [{"word": w, "count": c} for w, c in sorted(freq.items())]

st.set_page_config(page_title="Word Counts", layout="centered")
st.title("Word Counts")

text = st.text_area("Text", value=SAMPLE_TEXT, height=120)
freq = word_frequency(text)

c1, c2 = st.columns(2)
c1.metric("Total words", total_words(freq))
c2.metric("Unique words", len(freq))

if freq:
    st.dataframe(_rows(freq), hide_index=True)
    with st.expander("Raw output"):
        st.code("\n".join(format_lines(freq, sort=True)), language="text")
else:
    st.info("No words found.")
