"""Adapters driving the application: CLIs and the Streamlit interface."""
