from fastapi import FastAPI
from fastapi.testclient import TestClient

from user_service.entrypoints.middleware import PIPELINE, access_logger, error_translator, install_pipeline, token_gate


def _recording_stage(name, calls):
    async def stage(request, call_next):
        calls.append(f"before {name}")
        response = await call_next(request)
        calls.append(f"after {name}")
        return response

    return stage


def test_pipeline_order_is_error_gate_log():
    assert tuple(PIPELINE) == (error_translator, token_gate, access_logger)


def test_stages_run_outermost_first():
    calls = []
    app = FastAPI()

    @app.get("/ping")
    def ping():
        calls.append("handler")
        return {"ok": True}

    install_pipeline(app, [_recording_stage("outer", calls), _recording_stage("inner", calls)])

    r = TestClient(app).get("/ping")
    assert r.status_code == 200
    assert calls == ["before outer", "before inner", "handler", "after inner", "after outer"]


def test_error_translator_catches_failures_from_inner_stages():
    async def failing_stage(request, call_next):
        raise ValueError("bad stage")

    app = FastAPI()
    install_pipeline(app, [error_translator, failing_stage])

    r = TestClient(app).get("/anything")
    assert r.status_code == 500
    assert r.json() == {"message": "An unexpected error occurred.", "details": "bad stage"}
