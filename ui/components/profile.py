"""Profile sections: header, about, projects, publications, footer."""

from __future__ import annotations

import streamlit as st

from ui.content import ABOUT, PROFILE, PROJECTS, PUBLICATIONS, SOCIAL_LINKS


def render_header() -> None:
    """Avatar, name, tagline and social links."""
    _, center, _ = st.columns([2, 1, 2])
    with center:
        st.image(PROFILE["avatar_url"], width=128)
    st.markdown(f"<h1 style='text-align: center'>{PROFILE['name']}</h1>", unsafe_allow_html=True)
    st.markdown(
        f"<p style='text-align: center; color: gray'>{PROFILE['tagline']}</p>",
        unsafe_allow_html=True,
    )
    links = " · ".join(f"[{label}]({url})" for label, url in SOCIAL_LINKS)
    st.markdown(f"<div style='text-align: center'>\n\n{links}\n\n</div>", unsafe_allow_html=True)


def render_about() -> None:
    st.header("⚛️ About Me")
    with st.container(border=True):
        for paragraph in ABOUT:
            st.write(paragraph)


def render_projects() -> None:
    st.header("💼 Projects")
    cols = st.columns(2)
    for i, project in enumerate(PROJECTS):
        with cols[i % 2]:
            with st.container(border=True):
                st.subheader(project["title"])
                st.write(project["description"])
                st.link_button("🔗 View Project", project["link"])


def render_publications() -> None:
    st.header("📚 Publications")
    for pub in PUBLICATIONS:
        with st.container(border=True):
            st.markdown(f"**{pub['title']}**")
            st.caption(f"{pub['journal']}, {pub['year']}")


def render_footer() -> None:
    st.divider()
    st.caption(PROFILE["copyright"])
