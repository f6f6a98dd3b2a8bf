"""Assembly of the signup pipeline from settings and AWS clients.

The entry handler and the retry worker share one set of components so the
in-memory backend hands envelopes from one to the other within a process.
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

import structlog

from infrastructure.clients.aws import AWSClients
from infrastructure.configuration import RetrySettings, Settings
from infrastructure.notifications import AdminNotifier, create_admin_notifier
from infrastructure.observability import MetricsEmitter, create_metrics_emitter
from infrastructure.resilience.retry import RetryConfig, RetryQueue, create_retry_queue
from infrastructure.services import get_aws_clients, get_settings
from modules.signup.escalation import EscalationSink
from modules.signup.handler import PostConfirmationHandler
from modules.signup.records import RecordDefaults
from modules.signup.scheduler import RetryScheduler
from modules.signup.worker import RetryWorker
from modules.signup.writer import DynamoDBUserWriter, TimeBoundUserWriter

logger = structlog.get_logger()


@dataclass
class SignupPipeline:
    """The assembled entry handler and retry worker."""

    handler: PostConfirmationHandler
    worker: RetryWorker
    retry_queue: RetryQueue
    escalation_queue: RetryQueue


def build_retry_config(retry: RetrySettings) -> RetryConfig:
    """Translate retry settings into a validated RetryConfig."""
    return RetryConfig(
        max_attempts=retry.max_attempts,
        base_delay_seconds=retry.base_delay_seconds,
        max_delay_seconds=retry.max_delay_seconds,
        exponential_attempts=retry.exponential_attempts,
        attempt_timeout_seconds=retry.attempt_timeout_seconds,
        batch_size=retry.batch_size,
        batch_concurrency=retry.batch_concurrency,
    )


def build_metrics_emitter(settings: Settings, aws: AWSClients) -> MetricsEmitter:
    return create_metrics_emitter(
        settings.signup.METRICS_BACKEND,
        settings.signup.METRICS_NAMESPACE,
        cloudwatch=aws.cloudwatch,
    )


def build_admin_notifier(settings: Settings, aws: AWSClients) -> AdminNotifier:
    return create_admin_notifier(
        settings.signup.NOTIFIER_BACKEND,
        topic_arn=settings.signup.ADMIN_ALERT_TOPIC_ARN,
        subject_prefix=settings.signup.ALERT_SUBJECT_PREFIX,
        sns=aws.sns,
    )


def build_pipeline(
    settings: Settings,
    aws: AWSClients,
    metrics_emitter: Optional[MetricsEmitter] = None,
    notifier: Optional[AdminNotifier] = None,
) -> SignupPipeline:
    """Build the handler and worker with shared components.

    Args:
        settings: Application settings
        aws: AWS clients facade
        metrics_emitter: Optional emitter override (tests)
        notifier: Optional notifier override (tests)

    Raises:
        ValueError: If a backend is unknown or required configuration is missing
    """
    config = build_retry_config(settings.retry)
    metrics_emitter = metrics_emitter or build_metrics_emitter(settings, aws)
    notifier = notifier or build_admin_notifier(settings, aws)

    retry_queue = create_retry_queue(
        settings.retry.backend,
        queue_url=settings.retry.primary_queue_url,
        sqs_client=aws.sqs,
        name="primary-retry",
    )
    escalation_queue = create_retry_queue(
        settings.retry.backend,
        queue_url=settings.retry.manual_intervention_queue_url,
        sqs_client=aws.sqs,
        name="manual-intervention",
    )

    writer = TimeBoundUserWriter(
        DynamoDBUserWriter(aws.dynamodb, settings.signup.USERS_TABLE_NAME),
        timeout_seconds=config.attempt_timeout_seconds,
        max_workers=config.batch_concurrency,
    )
    scheduler = RetryScheduler(retry_queue, config, metrics_emitter)
    defaults = RecordDefaults(
        user_id_prefix=settings.signup.USER_ID_PREFIX,
        timezone=settings.signup.DEFAULT_TIMEZONE,
        preferred_language=settings.signup.DEFAULT_LANGUAGE,
    )

    handler = PostConfirmationHandler(
        writer=writer,
        scheduler=scheduler,
        metrics_emitter=metrics_emitter,
        notifier=notifier,
        defaults=defaults,
    )
    worker = RetryWorker(
        writer=writer,
        scheduler=scheduler,
        escalation_sink=EscalationSink(escalation_queue),
        metrics_emitter=metrics_emitter,
        notifier=notifier,
        config=config,
        queue=retry_queue,
    )

    logger.info(
        "signup_pipeline_built",
        retry_backend=settings.retry.backend,
        metrics_backend=settings.signup.METRICS_BACKEND,
        notifier_backend=settings.signup.NOTIFIER_BACKEND,
        max_attempts=config.max_attempts,
    )
    return SignupPipeline(
        handler=handler,
        worker=worker,
        retry_queue=retry_queue,
        escalation_queue=escalation_queue,
    )


@lru_cache
def get_signup_pipeline() -> SignupPipeline:
    """Application-scoped pipeline built from the cached settings and clients."""
    return build_pipeline(get_settings(), get_aws_clients())
