"""
CrabOps Streamlit Application

Main entry point for the UI. This is a thin client that calls the API.

Run with: streamlit run ui/app.py
"""

import streamlit as st

from ui.api_client import CrabOpsClient
from ui.config import get_settings
from ui.pages import dashboard

# Page configuration
settings = get_settings()
st.set_page_config(
    page_title=settings.shop_name,
    layout="wide",
    initial_sidebar_state="expanded",
)


def get_client() -> CrabOpsClient:
    """One client (and session cookie) per browser session."""
    if "client" not in st.session_state:
        st.session_state["client"] = CrabOpsClient()
    return st.session_state["client"]


def show_connection_error():
    """Show API connection error."""
    st.error(
        "Cannot connect to the CrabOps API. "
        "Please ensure the API server is running."
    )
    st.info(
        f"Expected API URL: {get_settings().api_base_url}\n\n"
        "Start the API with: `uvicorn api.main:app --reload`"
    )


def render_login(client: CrabOpsClient):
    """PIN login form."""
    st.title("Staff Login")

    with st.form("login"):
        pin = st.text_input("PIN", type="password", max_chars=32)
        submitted = st.form_submit_button("Log in")

    if submitted:
        result = client.login(pin)
        if result.success:
            st.rerun()
        else:
            st.error(result.error or "Login failed")


def main():
    """Main application entry point."""
    client = get_client()

    if not client.health_check().success:
        show_connection_error()
        return

    session = client.whoami()
    if not session.success:
        render_login(client)
        return

    # Sidebar
    st.sidebar.title(get_settings().shop_name)
    st.sidebar.caption(f"Logged in as {session.data.get('staff_name')}")

    if st.sidebar.button("Log out"):
        client.logout()
        st.rerun()

    dashboard.render(client)


if __name__ == "__main__":
    main()
