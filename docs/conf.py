import os
import sys

# Make the package importable without installing
sys.path.insert(0, os.path.abspath(".."))

project   = "consolidated_map"
copyright = "2026, consolidated_map contributors"
author    = "consolidated_map contributors"
root_doc  = "index"

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",       # Parameters sections in docstrings
    "sphinx.ext.intersphinx",    # link pd.DataFrame and typing to their docs
    "sphinx_autodoc_typehints",
    "sphinx_copybutton",
]

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
    "pandas": ("https://pandas.pydata.org/docs", None),
}

html_theme = "sphinx_rtd_theme"

autodoc_member_order = "bysource"
autodoc_typehints    = "description"
autodoc_default_options = {
    "members": True,
    "special-members": "__len__, __contains__",
    "show-inheritance": True,
}

napoleon_use_param = True
napoleon_use_rtype = False
