import re
from pathlib import Path
from typing import Mapping, Optional

VITE_PORT_KEY = "VITE_PORT"
DEFAULT_VITE_PORT = "5173"

# .env.local sits in the project root, one level above scripts/
ENV_LOCAL_PATH = Path(__file__).resolve().parent.parent / ".env.local"

# dotenv 允许 "export VITE_PORT=..." 这种写法
_PORT_LINE = re.compile(rf"^[ \t]*(?:export[ \t]+)?{VITE_PORT_KEY}=(.+)$", re.MULTILINE)


def default_env_path() -> Path:
    """
    The project's .env.local when running from a checkout; once installed
    into site-packages there is no project root above us, so use the
    current working directory instead.
    """
    if ENV_LOCAL_PATH.exists():
        return ENV_LOCAL_PATH
    return Path.cwd() / ".env.local"


def parse_vite_port(content: str) -> Optional[str]:
    """Return the value of the first VITE_PORT= line, stripped, or None."""
    m = _PORT_LINE.search(content)
    if not m:
        return None
    value = m.group(1).strip()
    return value or None


def read_env_file(path) -> Optional[str]:
    """读取 .env.local；文件不存在或读不了就当作没有"""
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return None


def resolve_vite_port(environ: Mapping[str, str], env_file_content: Optional[str] = None) -> str:
    """
    Pick the dev server port: environment first, then .env.local, then 5173.
    """
    # 1) 环境变量最优先
    port = environ.get(VITE_PORT_KEY)
    if port:
        return str(port)

    # 2) .env.local
    if env_file_content is not None:
        port = parse_vite_port(env_file_content)
        if port:
            return port

    # 3) 默认
    return DEFAULT_VITE_PORT
