from compassmenu.page_state import ExecutorPageStateProvider, StaticPageStateProvider
from compassmenu.types import PageState


def test_static_provider_resolves_immediately():
    provider = StaticPageStateProvider(PageState(is_last=True))
    future = provider.request_page_state(None)
    assert future.done()
    assert future.result().is_last
    assert provider.request_count == 1

    provider.state = PageState(is_loading=True)
    assert provider.request_page_state(None).result().is_loading


def test_executor_provider_runs_query_on_worker():
    targets = []

    def query(target):
        targets.append(target)
        return PageState(is_top=True)

    provider = ExecutorPageStateProvider(query, workers=1)
    try:
        future = provider.request_page_state("node")
        assert future.result(timeout=5).is_top
        assert targets == ["node"]
    finally:
        provider.shutdown()
