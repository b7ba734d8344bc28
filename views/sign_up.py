import streamlit as st
from services import session
from domain.constants import PASSWORD_RULES
from ui.components import hero, field_error


def view():
    if st.button("◀ Back to Sign In"):
        session.clear_errors('signup')
        session.go('signin')

    errors = session.get_errors('signup')
    left, right = st.columns([3, 2])
    with left:
        hero("Create Account", "Join thousands of smart farmers using AI-powered crop recommendations")
        with st.form("form_signup", clear_on_submit=False):
            phone = st.text_input("Phone Number", key="signup_phone", max_chars=10,
                                  placeholder="Enter 10-digit phone number")
            field_error(errors, 'phone')
            password = st.text_input("Password", key="signup_password", type="password",
                                     placeholder="Enter password")
            field_error(errors, 'password')
            st.caption("Password must contain:\n" + "\n".join(f"- {r}" for r in PASSWORD_RULES))
            if st.form_submit_button("Sign Up", type="primary", use_container_width=True):
                session.submit_sign_up({'phone': phone, 'password': password})
                st.rerun()

    with right:
        with st.container(border=True):
            st.markdown("### 🚜 Start Your Smart Farming Journey")
            st.write("Get personalized crop recommendations, optimize your yields, and "
                     "increase profitability with AI-powered insights")
            for point in ("AI Crop Analysis", "Budget Planning", "Activity Scheduling"):
                st.markdown(f"- {point}")
