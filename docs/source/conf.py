# Configuration file for the Sphinx documentation builder.
#
# This file only contains a selection of the most common options. For a full
# list see the documentation:
# https://www.sphinx-doc.org/en/master/usage/configuration.html

# -- Path setup --------------------------------------------------------------

import os
import sys

sys.path.append(os.path.abspath("../../src/"))


# -- Project information -----------------------------------------------------

project = "SimdRNG"
copyright = "2026, SimdRNG Developers"
author = "SimdRNG Developers"


# -- General configuration ---------------------------------------------------

extensions = [
    "sphinx.ext.autodoc",  # Core library for html generation from docstrings
    "sphinx.ext.autosummary",  # Create neat summary tables
    "sphinx.ext.coverage",  # Report missing documentation
    "sphinx.ext.napoleon",  # NumPy style docstrings
]
autosummary_generate = True
autosummary_imported_members = True
coverage_show_missing_items = True

# List of patterns, relative to source directory, that match files and
# directories to ignore when looking for source files.
exclude_patterns = []

# Move type hints from call signature to description
autodoc_typehints = "description"

# Order entries by type:
autodoc_member_order = "groupwise"

# Suppress unnecessary paths in class / function names:
add_module_names = False
python_use_unqualified_type_names = True

# -- Options for HTML output -------------------------------------------------

html_theme = "sphinx_rtd_theme"
