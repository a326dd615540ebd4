"""SQLite 数据库初始化

PRAGMA 配置 + tasks 表 DDL + 索引创建。
tasks 表没有 status 列：状态由 projection 在读取时派生。
"""

import aiosqlite

# tasks 表 DDL
_TASKS_DDL = """
CREATE TABLE IF NOT EXISTS tasks (
    task_id      TEXT PRIMARY KEY,
    name         TEXT NOT NULL,
    description  TEXT NOT NULL DEFAULT '',
    is_done      INTEGER NOT NULL DEFAULT 0,
    priority     TEXT NOT NULL DEFAULT 'Medium',
    created_at   TEXT NOT NULL,
    updated_at   TEXT,
    deadline     TEXT
);
"""

_TASKS_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_tasks_created_at ON tasks(created_at DESC);",
    "CREATE INDEX IF NOT EXISTS idx_tasks_priority ON tasks(priority);",
    "CREATE INDEX IF NOT EXISTS idx_tasks_deadline ON tasks(deadline);",
]


async def init_db(conn: aiosqlite.Connection) -> None:
    """初始化数据库：设置 PRAGMA + 创建表 + 创建索引

    Args:
        conn: aiosqlite 数据库连接
    """
    await conn.execute("PRAGMA journal_mode = WAL;")
    await conn.execute("PRAGMA busy_timeout = 5000;")

    await conn.execute(_TASKS_DDL)
    for idx_sql in _TASKS_INDEXES:
        await conn.execute(idx_sql)

    await conn.commit()


async def verify_wal_mode(conn: aiosqlite.Connection) -> bool:
    """验证 WAL 模式是否生效

    Returns:
        True 如果 WAL 模式已启用
    """
    cursor = await conn.execute("PRAGMA journal_mode;")
    row = await cursor.fetchone()
    return row is not None and row[0].lower() == "wal"
