"""Sphinx configuration for the gaussian-oracle project."""

from __future__ import annotations

from datetime import date
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as pkg_version

# --- Project info -------------------------------------------------------------

project = "Gaussian Oracle"
author = "Sigrun May"
copyright = f"{date.today().year}, {author}"

try:
    release = pkg_version("gaussian-oracle")
except PackageNotFoundError:
    release = "0.1.0"

# --- General configuration ----------------------------------------------------

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "sphinx.ext.viewcode",
    "sphinx.ext.intersphinx",
    "myst_parser",
    "sphinx_copybutton",
]

napoleon_google_docstring = True
napoleon_numpy_docstring = False

autodoc_typehints = "description"
autodoc_default_options = {
    "members": True,
    "show-inheritance": True,
}

source_suffix = {
    ".rst": "restructuredtext",
    ".md": "markdown",
}

exclude_patterns = []

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
    "numpy": ("https://numpy.org/doc/stable/", None),
    "pandas": ("https://pandas.pydata.org/docs/", None),
}

# --- HTML output --------------------------------------------------------------

html_theme = "sphinx_rtd_theme"
html_show_sphinx = False
