"""Client package for the Smart Care hospital monitoring front end.

Holds the session store, transport, query cache, resource hooks and access
gate used by the Streamlit pages in ``app.py``.
"""
