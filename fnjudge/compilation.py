import logging
import multiprocessing
import resource
import time
from multiprocessing.connection import Connection
from types import CodeType
from typing import Any, Callable, List, NamedTuple, Optional

import fnjudge.constants as constants

from .verdict import Verdict

logger = logging.getLogger(__name__)

SUBMISSION_FILENAME = '<submission>'


class CompilationError(Exception):
    pass


class RunResult(NamedTuple):
    verdict: Verdict  # AC only means the function returned
    output: Any
    time_used: float  # seconds


def compile_source(source_code: str) -> CodeType:
    try:
        return compile(source_code, SUBMISSION_FILENAME, 'exec')
    except (SyntaxError, ValueError) as e:
        raise CompilationError(str(e)) from e


def prepare(source_code: str, function_name: str) -> Callable:
    """Execute the submission in a fresh namespace and return its solution function.

    This runs the submission in the current process, so only use it for
    trusted code. ``run`` wraps it in a child process.
    """
    code = compile_source(source_code)
    namespace = {'__name__': 'submission'}
    exec(code, namespace)
    candidate = namespace.get(function_name)
    if not callable(candidate):
        raise CompilationError(f'{function_name} is not defined')
    return candidate


def _run_worker(source_code: str, function_name: str, input_: List[int],
                memory_limit: Optional[int], conn: Connection) -> None:
    if memory_limit:
        limit = memory_limit * 1024 * 1024  # in bytes
        resource.setrlimit(resource.RLIMIT_AS, (limit, limit))

    start_time = time.perf_counter()
    try:
        candidate = prepare(source_code, function_name)
        conn.send(('ready',))
        start_time = time.perf_counter()
        output = candidate(input_)
        conn.send((Verdict.AC, output, time.perf_counter() - start_time))
    except CompilationError as e:
        conn.send((Verdict.CE, str(e), 0.0))
    except Exception as e:  # anything raised by the submission, including unpicklable output
        conn.send((Verdict.RE, repr(e), time.perf_counter() - start_time))
    finally:
        conn.close()


def run(source_code: str, function_name: str, input_: List[int],
        time_limit: Optional[float] = None,
        memory_limit: Optional[int] = None) -> RunResult:
    recv_conn, send_conn = multiprocessing.Pipe(duplex=False)
    process = multiprocessing.Process(
        target=_run_worker,
        args=(source_code, function_name, input_, memory_limit, send_conn),
        daemon=True
    )
    process.start()
    send_conn.close()  # child holds the only write end, so a crash reads as EOF

    try:
        # Start-up and module execution are bounded by the wall time only
        if not recv_conn.poll(constants.WALL_TIME_LIMIT):
            logger.error(f'pid {process.pid}: submission did not start within {constants.WALL_TIME_LIMIT}s')
            return RunResult(Verdict.SE, None, 0.0)
        message = recv_conn.recv()
        if message[0] != 'ready':
            return RunResult(*message)

        if not recv_conn.poll(time_limit):
            logger.debug(f'pid {process.pid}: time limit of {time_limit}s exceeded')
            return RunResult(Verdict.TLE, None, time_limit)
        return RunResult(*recv_conn.recv())
    except EOFError:
        logger.debug(f'pid {process.pid}: exited with code {process.exitcode} before reporting')
        return RunResult(Verdict.RE, None, 0.0)
    finally:
        recv_conn.close()
        process.join(timeout=0.1)
        if process.is_alive():
            process.kill()
            process.join()
