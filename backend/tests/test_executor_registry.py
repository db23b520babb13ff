def test_registry_resolves_builtin_providers_case_insensitively():
    from semant.services.executors import registry
    from semant.services.executors.bitext import BitextExecutorAdapter
    from semant.services.executors.mock import MockExecutorAdapter

    assert isinstance(registry.get("Bitext"), BitextExecutorAdapter)
    assert isinstance(registry.get("mock"), MockExecutorAdapter)
    assert registry.get("unknown") is None
    assert registry.providers() == ["bitext", "mock"]


def test_mock_executor_follows_progress_protocol():
    from semant.services.executors import AnalysisExecutionStatus, ExecutionContext, ResultSet
    from semant.services.executors.mock import MockExecutorAdapter

    events = []

    def _callback(provider, event):
        events.append((provider, event))
        return event.processed < 2

    context = ExecutionContext(
        key="",
        secret="",
        language="en",
        results={"a": ResultSet("x"), "b": ResultSet("y"), "c": ResultSet("z")},
        progress_callback=_callback,
    )

    summary = MockExecutorAdapter().execute(context)

    assert [e.status for _, e in events] == [
        AnalysisExecutionStatus.PROCESSED,
        AnalysisExecutionStatus.PROCESSED,
        AnalysisExecutionStatus.SUCCESS,
    ]
    assert all(provider == "Mock" for provider, _ in events)
    assert context.results["b"].outputs[0].label == "neutral"
    assert context.results["c"].outputs == []
    assert summary.canceled is True


def test_mock_executor_empty_context():
    from semant.services.executors import AnalysisExecutionStatus, ExecutionContext
    from semant.services.executors.mock import MockExecutorAdapter

    events = []
    context = ExecutionContext(
        key="", secret="", language="en", results={}, progress_callback=lambda p, e: events.append(e)
    )

    MockExecutorAdapter().execute(context)

    assert [e.status for e in events] == [AnalysisExecutionStatus.CANCELED]
