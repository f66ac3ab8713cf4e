from calgrid.ui.components.event_card import TINT_ALPHA, tint


def test_tint_keeps_the_event_hue():
    assert tint("#3B82F6") == f"rgba(59, 130, 246, {TINT_ALPHA})"


def test_tint_accepts_custom_alpha():
    assert tint("#10B981", alpha=128) == "rgba(16, 185, 129, 128)"
