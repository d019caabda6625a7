from __future__ import annotations

from factories import make_proxy, proxy_labels


def test_debounce_single_application(qtbot):
    _, proxy = make_proxy()
    applied = []
    proxy.filterPatternChanged.connect(applied.append)

    # Rapidly schedule multiple patterns; only the last should apply
    proxy.scheduleFilterPattern("ter")
    proxy.scheduleFilterPattern("term")
    proxy.scheduleFilterPattern("termi")
    assert proxy.filterPattern().text == ""

    qtbot.waitUntil(lambda: proxy.filterPattern().text == "termi", timeout=2000)
    assert applied == ["termi"]
    assert proxy_labels(proxy) == ["Terminal"]


def test_immediate_set_does_not_wait(qtbot):
    _, proxy = make_proxy()
    proxy.setFilterPattern("browser")
    assert proxy_labels(proxy) == ["Browser"]
