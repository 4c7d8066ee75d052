"""LangGraph workflows for analysis, article components and article generation."""


def create_workflow_graph(spec):
    """Lazy import to avoid circular import with content_toolkit.agents."""
    from content_toolkit.workflow.graph import create_workflow_graph as _create
    return _create(spec)


__all__ = ["create_workflow_graph"]
