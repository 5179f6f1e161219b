# flake8: noqa
"""Sphinx configuration for pyvatis documentation."""

from datetime import date

import pyvatis

# -- Project information -----------------------------------------------------

project = "pyvatis"
author = "pyvatis developers"
copyright = f"2024-{date.today().year}, {author}"

version = pyvatis.__version__
release = version

# -- General configuration ---------------------------------------------------

needs_sphinx = "7.0"

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.autosummary",
    "sphinx.ext.intersphinx",
    "sphinx.ext.napoleon",
    "sphinx.ext.viewcode",
    "sphinxcontrib.autodoc_pydantic",
]

# Models and decoders use Google style docstrings
napoleon_google_docstring = True
napoleon_numpy_docstring = False
napoleon_include_init_with_doc = True
napoleon_use_param = True
napoleon_use_rtype = True
napoleon_attr_annotations = True

# Show the entity model fields along with their descriptions
autodoc_pydantic_model_show_json = False
autodoc_pydantic_model_show_config_summary = False
autodoc_pydantic_model_show_validator_summary = False
autodoc_pydantic_model_show_field_summary = True
autodoc_pydantic_field_show_constraints = True

autodoc_default_options = {
    "members": True,
    "undoc-members": True,
    "show-inheritance": True,
    "member-order": "bysource",
}
autodoc_typehints = "description"
autodoc_typehints_format = "short"

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
    "numpy": ("https://numpy.org/doc/stable/", None),
}

templates_path = ["_templates"]
source_suffix = ".rst"
master_doc = "index"
exclude_patterns = ["_build", "Thumbs.db", ".DS_Store"]
pygments_style = "sphinx"

# -- Options for HTML output -------------------------------------------------

html_theme = "pydata_sphinx_theme"
html_theme_options = {
    "show_toc_level": 2,
    "navigation_with_keys": True,
    "secondary_sidebar_items": ["page-toc"],
}
html_title = f"pyvatis {version}"
html_short_title = "pyvatis"
html_show_sourcelink = False
htmlhelp_basename = "pyvatisdoc"

# -- Options for manual page output ------------------------------------------

man_pages = [("index", "pyvatis", "pyvatis Documentation", [author], 1)]
