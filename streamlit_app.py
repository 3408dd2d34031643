import os
import sys

# Get the absolute path to the project sources
project_root = os.path.dirname(os.path.abspath(__file__))
src_root = os.path.join(project_root, "src")

# Add the sources to the Python path
if src_root not in sys.path:
    sys.path.insert(0, src_root)

import pandas as pd
import streamlit as st

from profile_ocr.dashboard import DashboardController
from profile_ocr.dashboard.controller import STATUS_FILTERS, VIEW_MODES
from profile_ocr.dashboard.views import format_revenue
from profile_ocr.exceptions import InvalidInput
from profile_ocr.logging_config import setup_logging
from profile_ocr.models import ImageUpload

# Initialize logging
logger = setup_logging("streamlit_app")

# Initialize session state
if "controller" not in st.session_state:
    st.session_state.controller = DashboardController()

STATUS_BADGES = {
    "completed": "🟢",
    "processing": "🟡",
    "pending": "🟠",
    "error": "🔴",
}


def render_upload(controller: DashboardController):
    st.header("OCR Generator")
    uploaded = st.file_uploader(
        "Upload profile screenshots",
        type=["png", "jpg", "jpeg", "webp"],
        accept_multiple_files=True,
    )
    if uploaded:
        controller.add_files(
            [ImageUpload(file_name=f.name, content=f.getvalue(), mime_type=f.type or "image/jpeg") for f in uploaded]
        )
    else:
        controller.clear_files()

    state = controller.state
    if state.uploaded_files:
        st.write(f"{len(state.uploaded_files)} file(s) selected")

    if st.button("Process Images", disabled=not state.uploaded_files):
        with st.spinner("Extracting profiles..."):
            try:
                profiles = controller.run_extraction()
            except InvalidInput as e:
                st.error(str(e))
            else:
                if controller.state.last_error:
                    st.error(f"Extraction failed: {controller.state.last_error}")
                elif not profiles:
                    st.warning("No profiles extracted")
                else:
                    st.success(f"Extracted {len(profiles)} profile(s)")

    if st.button("Load demo profiles"):
        controller.load_demo_profiles()


def render_profile_card(profile):
    with st.container(border=True):
        st.markdown(f"**{profile.display_name or profile.username}** {STATUS_BADGES.get(profile.status.value, '')}")
        st.caption(f"{profile.username} · {profile.platform} · {profile.follower_count_text} followers")
        if profile.bio:
            st.write(profile.bio)
        for link in profile.extracted_links:
            st.markdown(f"- [{link.title or link.url}]({link.url}) `{link.category.value}`")
        if profile.revenue_estimate is not None:
            st.write(format_revenue(profile.revenue_estimate))


def render_profiles(controller: DashboardController):
    state = controller.state
    if state.is_demo:
        st.info("Showing demonstration profiles, not extracted data.")

    col1, col2, col3 = st.columns(3)
    with col1:
        controller.set_search_term(st.text_input("Search", value=state.search_term))
    with col2:
        controller.set_status_filter(
            st.selectbox("Status", STATUS_FILTERS, index=STATUS_FILTERS.index(state.status_filter))
        )
    with col3:
        controller.set_view_mode(st.radio("View", VIEW_MODES, index=VIEW_MODES.index(state.view_mode), horizontal=True))

    profiles = controller.filtered_view()
    st.subheader(f"Extracted Profiles ({len(profiles)})")

    if controller.state.view_mode == "list":
        df = pd.DataFrame(
            [
                {
                    "Username": p.username,
                    "Display Name": p.display_name,
                    "Platform": p.platform,
                    "Followers": p.follower_count_text,
                    "Links": len(p.bio_links),
                    "Revenue": format_revenue(p.revenue_estimate),
                    "Status": p.status.value,
                }
                for p in profiles
            ]
        )
        st.dataframe(df, use_container_width=True)
    else:
        columns = st.columns(2)
        for index, profile in enumerate(profiles):
            with columns[index % 2]:
                render_profile_card(profile)

    st.download_button(
        "Export CSV",
        data=controller.export_csv(),
        file_name="extracted_profiles.csv",
        mime="text/csv",
        disabled=not controller.state.extracted_profiles,
    )


def render_analytics(controller: DashboardController):
    aggregates = controller.aggregates()
    col1, col2, col3 = st.columns(3)
    col1.metric("Completed", aggregates.completed_count)
    col2.metric("Total Revenue", f"${aggregates.total_revenue:,.0f}")
    col3.metric("Average Revenue", f"${aggregates.average_revenue:,.0f}")
    if aggregates.platform_counts:
        st.bar_chart(pd.Series(aggregates.platform_counts, name="profiles"))


def main():
    st.title("Creator Profile Dashboard")
    controller = st.session_state.controller

    ocr_tab, profiles_tab, analytics_tab = st.tabs(["OCR Generator", "Profiles", "Analytics"])
    with ocr_tab:
        render_upload(controller)
    with profiles_tab:
        render_profiles(controller)
    with analytics_tab:
        render_analytics(controller)


if __name__ == "__main__":
    main()
