# src/photo_normalizer/core/error_handling.py

import functools
from typing import Any, Callable, Optional, Type, TypeVar

from botocore.exceptions import BotoCoreError, ClientError

from .exceptions import PhotoNormalizerError, S3Error
from .logging_config import get_logger

F = TypeVar("F", bound=Callable[..., Any])


def with_error_handling(
    func: Optional[F] = None,
    *,
    client_error: Type[PhotoNormalizerError] = S3Error,
) -> Any:
    """
    A decorator to wrap AWS adapter calls with standardized error handling.

    AWS client failures are re-raised as ``client_error`` (``S3Error`` unless
    the caller talks to another service). Pipeline errors and anything
    unrecognised propagate unchanged.

    The failure is only recorded at DEBUG here: whether it is fatal or
    best-effort is decided by the caller, which logs it at the matching level.

    Usable bare (``@with_error_handling``) or parametrized
    (``@with_error_handling(client_error=RecordStoreError)``).
    """

    def decorator(inner: F) -> F:
        @functools.wraps(inner)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return inner(*args, **kwargs)
            except PhotoNormalizerError:
                raise
            except Exception as e:
                get_logger(inner.__qualname__).debug(
                    f"Error in '{inner.__name__}': {e}", exc_info=True
                )
                if isinstance(e, (ClientError, BotoCoreError)):
                    raise client_error(
                        f"AWS operation failed in {inner.__name__}: {e}"
                    ) from e
                raise

        return wrapper  # type: ignore[return-value]

    if func is not None:
        return decorator(func)
    return decorator
