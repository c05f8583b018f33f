"""Operation logging for map construction."""

import functools
import inspect
import time
from typing import Any, Callable, Dict, Optional, TypeVar

from .structured_logger import get_logger, operation_context

F = TypeVar('F', bound=Callable[..., Any])

_SCALARS = (str, int, float, bool, type(None))


def _cell_count(result: Any) -> Optional[int]:
    """Number of cells of the grid returned (or wrapped) by an operation."""
    grid = getattr(result, 'map', result)
    shape = getattr(grid, 'shape', None)
    if isinstance(shape, tuple) and len(shape) == 2:
        return int(shape[0]) * int(shape[1])
    return None


def _describe_arguments(func: Callable, args, kwargs) -> Dict[str, Any]:
    bound = inspect.signature(func).bind(*args, **kwargs)
    bound.apply_defaults()
    return {
        name: value if isinstance(value, _SCALARS) else f"<{type(value).__name__}>"
        for name, value in bound.arguments.items()
        if name not in ('self', 'cls')
    }


def log_operation(operation_name: Optional[str] = None,
                  log_args: bool = False,
                  log_performance: bool = True):
    """Time a map operation and report its outcome.

    While the function runs, ``operation_context`` holds the operation name,
    so every record logged underneath is tagged with it. When the function
    returns a grid (or a local map wrapping one) its cell count is reported
    as ``cells_processed``. Failures are logged as warnings and re-raised.

    Records go to the ``<module>.operations`` logger, which can be silenced
    separately from the module's own logger.

    Example:
        @log_operation("rasterize_polygon")
        def to_cell_map(self, resolution):
            ...
    """
    def decorator(func: F) -> F:
        name = operation_name or func.__name__
        logger = get_logger(f"{func.__module__}.operations")

        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> Any:
            context: Dict[str, Any] = {'operation': name}
            if log_args:
                context['arguments'] = _describe_arguments(func, args, kwargs)

            token = operation_context.set(name)
            started = time.perf_counter()
            try:
                logger.debug(f"Starting {name}", extra={'context': context})
                result = func(*args, **kwargs)
            except Exception as e:
                logger.warning(
                    f"Failed {name}: {e}",
                    extra={
                        'context': {**context, 'error_type': type(e).__name__},
                        'performance': {
                            'duration_seconds': round(time.perf_counter() - started, 6),
                            'status': 'failed',
                        },
                    },
                )
                raise
            else:
                if log_performance:
                    metrics: Dict[str, Any] = {'status': 'success'}
                    cells = _cell_count(result)
                    if cells is not None:
                        metrics['cells_processed'] = cells
                    logger.log_performance(name, time.perf_counter() - started, **metrics)
                else:
                    logger.debug(f"Completed {name}", extra={'context': context})
                return result
            finally:
                operation_context.reset(token)

        return wrapper  # type: ignore
    return decorator
