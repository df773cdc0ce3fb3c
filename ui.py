"""
HTML for the forbidden gestures panel.
"""
from gesture_detector import GESTURE_LABELS


def panel_html(active_gesture):
    """Forbidden gestures panel, with the active one highlighted."""
    items = []
    for gesture, item in GESTURE_LABELS.items():
        active = gesture == active_gesture
        background = "rgba(255,255,255,0.15)" if active else "rgba(0,0,0,0.2)"
        border = f"1px solid {item['color']}80" if active else "1px solid transparent"
        weight = "700" if active else "500"
        glow = f"0 0 20px {item['color']}40" if active else "none"
        items.append(
            f'<div style="display:flex;align-items:center;padding:12px 16px;border-radius:12px;'
            f"background-color:{background};border:{border};border-left:4px solid {item['color']};"
            f'box-shadow:{glow};">'
            f'<span style="font-size:1.5rem;margin-right:12px">{item["icon"]}</span>'
            f'<span style="font-weight:{weight}">{item["label"]}</span></div>'
        )
    return (
        '<div style="display:grid;grid-template-columns:repeat(auto-fit, minmax(160px, 1fr));gap:12px">'
        + "".join(items)
        + "</div>"
    )
