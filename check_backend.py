"""
Verify the toolkit: imports, workflow graphs, credentials and an optional live analysis run.
Run: python check_backend.py [keyword]
"""
import asyncio
import sys


def check(name: str, fn):
    try:
        fn()
        print(f"  OK  {name}")
        return True
    except Exception as e:
        print(f"  FAIL {name}: {e}")
        return False


def main_sync():
    print("1. Imports (config, models, services, agents, workflow, routes)...")
    ok = True
    ok &= check("config", lambda: __import__("content_toolkit.config"))
    ok &= check("models (schemas + catalogs)", lambda: __import__("content_toolkit.models.schemas") or __import__("content_toolkit.models.catalogs"))
    ok &= check("services (gemini, retry, link verifier, parser)", lambda: __import__("content_toolkit.services.gemini_service") or __import__("content_toolkit.services.retry") or __import__("content_toolkit.services.link_verifier") or __import__("content_toolkit.services.article_parser"))
    ok &= check("agents", lambda: __import__("content_toolkit.agents"))
    ok &= check("workflow (state + graph + orchestrator)", lambda: __import__("content_toolkit.workflow.orchestrator"))
    ok &= check("main app", lambda: __import__("content_toolkit.main"))
    if not ok:
        return 1

    print("\n2. LangGraph compile...")
    try:
        from content_toolkit.workflow import create_workflow_graph
        from content_toolkit.workflow.graph import WORKFLOWS
        for spec in WORKFLOWS.values():
            create_workflow_graph(spec)
        print(f"  OK  {len(WORKFLOWS)} graphs compiled")
    except Exception as e:
        print(f"  FAIL Graph: {e}")
        return 1

    async def run_async_checks(keyword: str):
        from content_toolkit.services.credentials import CredentialProvider
        from content_toolkit.services.errors import ConfigurationError
        from content_toolkit.services.gemini_service import GeminiService
        from content_toolkit.workflow.orchestrator import PipelineOrchestrator

        print("\n3. Credentials...")
        credentials = CredentialProvider()
        try:
            await credentials.get_api_key()
        except ConfigurationError:
            print("  SKIP No GEMINI_API_KEY or KEY_ENDPOINT_URL (add to .env to run the live check).")
            return None
        print("  OK  API key resolved")

        print(f"\n4. Analysis workflow for '{keyword}' (requires a working Gemini key)...")

        def progress(stage, message):
            print(f"      [{stage.value}] {message}")

        orchestrator = PipelineOrchestrator(GeminiService(credentials), progress=progress, pause_ms=0)
        return await orchestrator.run_analysis(keyword, f"A simple {keyword} recipe with a short ingredient list.")

    keyword = sys.argv[1] if len(sys.argv) > 1 else "banana bread"
    result = asyncio.run(run_async_checks(keyword))
    if result is not None:
        if result.ok:
            print(f"  OK  Analysis workflow ended in {result.stage.value}.")
        elif result.is_billing_error:
            print(f"  WARN Billing required: {result.error}")
        else:
            print(f"  FAIL {result.error}")
            return 1

    print("\nToolkit check done.")
    return 0


if __name__ == "__main__":
    sys.exit(main_sync())
