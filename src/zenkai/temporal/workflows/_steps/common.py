"""Shared workflow step utilities."""

from datetime import timedelta

from temporalio.common import RetryPolicy

DEFAULT_RETRY = RetryPolicy(
    maximum_attempts=5,
    initial_interval=timedelta(seconds=1),
)


def short_activity_opts() -> dict[str, object]:
    """Options for quick activities (DB writes, sandbox lookups)."""
    return {
        "start_to_close_timeout": timedelta(seconds=30),
        "retry_policy": RetryPolicy(
            maximum_attempts=3,
            initial_interval=timedelta(seconds=1),
        ),
    }


def medium_activity_opts() -> dict[str, object]:
    """Options for medium activities (sandbox provisioning)."""
    return {
        "start_to_close_timeout": timedelta(seconds=120),
        "retry_policy": DEFAULT_RETRY,
    }


def long_activity_opts() -> dict[str, object]:
    """Options for long activities (agent runs)."""
    return {
        "start_to_close_timeout": timedelta(minutes=15),
        "retry_policy": RetryPolicy(
            maximum_attempts=3,
            initial_interval=timedelta(seconds=5),
            backoff_coefficient=2.0,
        ),
    }
