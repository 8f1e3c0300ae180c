"""Common helper utilities used by the Streamlit app.

The helpers package wires configuration and collaborators together so that
UI layers (Streamlit) or other scripts can call a single function.
"""
