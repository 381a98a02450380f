"""Static biography content shown on the portfolio page."""

from __future__ import annotations

PROFILE: dict[str, str] = {
    "name": "Franklin Ramos",
    "tagline": "Biomedical Engineer | Backend Developer | Data Scientist",
    "avatar_url": (
        "https://images.unsplash.com/photo-1507003211169-0a1dd7228f2d"
        "?ixlib=rb-1.2.1&auto=format&fit=crop&w=300&q=80"
    ),
    "copyright": "© 2024 Franklin Ramos. All rights reserved.",
}

# (label, url); "#" until real profile URLs exist
SOCIAL_LINKS: list[tuple[str, str]] = [
    ("GitHub", "#"),
    ("LinkedIn", "#"),
    ("Email", "#"),
]

ABOUT: list[str] = [
    "As a backend developer and data scientist with a background in biomedical "
    "engineering, I specialize in creating robust server-side applications and "
    "deriving insights from complex datasets. My expertise lies in Python, where "
    "I leverage its powerful ecosystem for both web development and data analysis.",
    "With a strong foundation in scientific computing and machine learning, I "
    "excel at developing scalable solutions for data-intensive problems. My work "
    "often involves designing efficient APIs, implementing machine learning "
    "models, and creating data pipelines that transform raw information into "
    "actionable insights.",
]

PROJECTS: list[dict[str, str]] = [
    {
        "title": "Quantum Entanglement Simulator",
        "description": "A web-based simulator for quantum entanglement experiments.",
        "link": "https://github.com/franklinramos/quantum-simulator",
    },
    {
        "title": "Neural Network Visualizer",
        "description": "Interactive tool for visualizing neural network architectures and data flow.",
        "link": "https://github.com/franklinramos/nn-visualizer",
    },
    {
        "title": "Climate Change Data Analysis",
        "description": "Python-based analysis of global climate data using machine learning techniques.",
        "link": "https://github.com/franklinramos/climate-analysis",
    },
]

PUBLICATIONS: list[dict[str, str | int]] = [
    {
        "title": "Advancements in Quantum Computing",
        "journal": "Nature Quantum Information",
        "year": 2023,
    },
    {
        "title": "Machine Learning in Climate Science",
        "journal": "Journal of Climate",
        "year": 2022,
    },
]
