import logging

import streamlit as st

from minifusion import ui
from minifusion.config import Settings


def configure_logging(level):
    # basicConfig only acts on the first run of the process
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


settings = Settings.from_env()
configure_logging(settings.log_level)

st.set_page_config(page_title=settings.page_title, page_icon="📎")
ui.render(settings)
