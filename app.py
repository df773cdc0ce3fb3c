import time

import streamlit as st
from streamlit_webrtc import webrtc_streamer, WebRtcMode, RTCConfiguration

from config import load_config, setup_logging
from ui import panel_html
from video_processor import CensorVideoProcessor

POLL_SECONDS = 0.1

config = load_config()
setup_logging(config.log_level)

st.set_page_config(page_title="Obscene Gesture Censor", page_icon="🚫")
st.title("Obscene Gesture Censor")
st.write("Show a gesture to the camera. Obscene ones get blurred out.")

webrtc_ctx = webrtc_streamer(
    key="gesture-censor",
    mode=WebRtcMode.SENDRECV,
    rtc_configuration=RTCConfiguration(config.rtc.to_rtc_configuration()),
    media_stream_constraints={"video": True, "audio": False},
    video_processor_factory=lambda: CensorVideoProcessor(config),
    async_processing=True,
)

status = st.empty()
st.subheader("🚫 Forbidden gestures")
panel = st.empty()
panel.markdown(panel_html(None), unsafe_allow_html=True)

# Refresh loading/error state and the highlight panel while the stream runs
while webrtc_ctx.state.playing:
    processor = webrtc_ctx.video_processor
    if processor is None:
        status.info("Loading model...")
        time.sleep(POLL_SECONDS)
        continue

    state = processor.snapshot()
    if state.error is not None:
        status.error(f"⚠️ {state.error.message}")
        panel.markdown(panel_html(None), unsafe_allow_html=True)
        break

    if state.ready:
        status.empty()
    else:
        status.info("Loading model...")
    panel.markdown(panel_html(state.gesture), unsafe_allow_html=True)
    time.sleep(POLL_SECONDS)
