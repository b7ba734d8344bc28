import streamlit as st
from services import session
from ui.components import hero, field_error

WELCOME_POINTS = ["Personalized Crop Plans", "Smart Activity Calendar", "Budget Optimization"]


def view():
    if st.button("◀ Back to Home"):
        session.clear_errors('signin')
        session.go('landing')

    errors = session.get_errors('signin')
    left, right = st.columns([3, 2])
    with left:
        hero("Sign In", "Welcome back! Sign in to access your farming dashboard")
        with st.form("form_signin", clear_on_submit=False):
            phone = st.text_input("Phone Number", key="signin_phone", max_chars=10,
                                  placeholder="Enter 10-digit phone number")
            field_error(errors, 'phone')
            gmail = st.text_input("Gmail Address", key="signin_gmail",
                                  placeholder="Enter your Gmail address")
            field_error(errors, 'gmail')
            username = st.text_input("Username", key="signin_username", placeholder="Enter username")
            field_error(errors, 'username')
            password = st.text_input("Password", key="signin_password", type="password",
                                     placeholder="Enter password")
            field_error(errors, 'password')
            submitted = st.form_submit_button("Sign In", type="primary", use_container_width=True)
            if submitted:
                session.submit_sign_in({
                    'phone': phone,
                    'gmail': gmail,
                    'username': username,
                    'password': password,
                })
                # Rerun either way: next page on success, inline errors otherwise
                st.rerun()

        st.caption("Don't have an account?")
        if st.button("Sign Up"):
            session.clear_errors('signin')
            session.go('signup')

    with right:
        with st.container(border=True):
            st.markdown("### 🌱 Welcome Back, Farmer!")
            st.write("Continue your journey with AI-powered crop recommendations "
                     "and smart farming insights")
            for point in WELCOME_POINTS:
                st.markdown(f"- {point}")
