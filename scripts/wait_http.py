import time
import requests

DEFAULT_INTERVAL = 0.25
DEFAULT_REQUEST_TIMEOUT = 5


def is_ready_status(status: int) -> bool:
    """Any answer below 500 means the server is up, even 404 on the root."""
    return 200 <= status < 500


def wait_http(url: str, timeout: float, validate_status=is_ready_status,
              interval: float = DEFAULT_INTERVAL,
              request_timeout: float = DEFAULT_REQUEST_TIMEOUT) -> requests.Response:
    """
    轮询 url 直到返回的状态码被 validate_status 接受

    Always probes at least once, even with a zero timeout. Returns the
    accepted response. Raises TimeoutError once the deadline passes; the
    message carries the last probe error.
    """
    deadline = time.time() + timeout
    last_err = None
    while True:
        try:
            r = requests.get(url, timeout=request_timeout)
            if validate_status(r.status_code):
                return r
            last_err = f"status={r.status_code}"
        except requests.RequestException as e:
            last_err = str(e)
        if time.time() >= deadline:
            break
        time.sleep(interval)

    raise TimeoutError(f"Timeout ({timeout}s) waiting for {url}. Last error: {last_err}")
