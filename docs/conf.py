# Sphinx configuration for the sciscript API reference.

project = 'sciscript'
author = 'sciscript developers'
copyright = f'2026, {author}'
release = version = '0.1.0'

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.napoleon',
    'sphinx.ext.intersphinx',
    'sphinx.ext.viewcode',
]

# docstrings use Args:/Returns:/Raises: sections
napoleon_numpy_docstrings = False
napoleon_include_init_with_doc = True

autodoc_member_order = 'bysource'
autodoc_typehints = 'description'
autodoc_default_options = {'members': True, 'show-inheritance': True}

exclude_patterns = ['_build', '*.md']

html_theme = 'furo'
html_title = 'sciscript'

intersphinx_mapping = {
    name: (url, None) for name, url in {
        'python': 'https://docs.python.org/3',
        'numpy': 'https://numpy.org/doc/stable/',
        'scipy': 'https://docs.scipy.org/doc/scipy/',
        'pandas': 'https://pandas.pydata.org/docs/',
    }.items()
}
