"""健康检查路由

GET /health: Liveness 检查，永远返回 200。
GET /ready: Readiness 检查，包含 SQLite 连通性与 WAL 模式。
"""

import structlog
from fastapi import APIRouter, Request
from starlette.responses import JSONResponse
from todolist.core.store import verify_wal_mode

log = structlog.get_logger()

router = APIRouter()


@router.get("/health")
async def health():
    """Liveness 检查 -- 永远返回 200"""
    return {"status": "ok"}


@router.get("/ready")
async def ready(request: Request):
    """Readiness 检查 -- 验证 SQLite 可用

    检查项：
    1. sqlite: 数据库连通性
    2. wal_mode: journal_mode 是否为 WAL（仅提示，不影响就绪）
    """
    checks: dict[str, str] = {}
    all_ok = True

    try:
        store_group = request.app.state.store_group
        cursor = await store_group.conn.execute("SELECT 1")
        await cursor.fetchone()
        checks["sqlite"] = "ok"
        checks["wal_mode"] = "ok" if await verify_wal_mode(store_group.conn) else "off"
    except Exception as e:
        log.warning("readiness_check_failed", error=str(e))
        checks["sqlite"] = f"error: {e}"
        all_ok = False

    status_code = 200 if all_ok else 503
    return JSONResponse(
        status_code=status_code,
        content={
            "status": "ready" if all_ok else "not_ready",
            "checks": checks,
        },
    )
