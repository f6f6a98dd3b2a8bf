"""Lambda entrypoints and the standalone retry polling loop.

- post_confirmation_handler: identity provider post-confirmation trigger
- retry_processor_handler: SQS event source for the primary retry queue
- main: polls the retry queue with RetryWorker.run_once (in-memory backend
  and non-Lambda deployments)
"""

import time

from dotenv import load_dotenv

from infrastructure.logging import clear_invocation_context, get_module_logger
from modules.signup.factory import get_signup_pipeline

load_dotenv()

logger = get_module_logger()


def post_confirmation_handler(event, context):
    """Create the user record for a confirmed signup; always returns the event."""
    clear_invocation_context()
    try:
        pipeline = get_signup_pipeline()
    except Exception as e:  # pylint: disable=broad-except
        # Without a pipeline nothing can be recorded; the signup still proceeds
        logger.critical(
            "signup_pipeline_unavailable",
            error=str(e),
            user_name=event.get("userName") if isinstance(event, dict) else None,
        )
        return event
    return pipeline.handler.handle(event, context)


def retry_processor_handler(event, context):
    """Process a batch of retry envelopes delivered by SQS.

    Returns an SQS partial batch response. A pipeline that cannot be built
    raises so the whole batch is redelivered.
    """
    clear_invocation_context()
    pipeline = get_signup_pipeline()
    response = pipeline.worker.handle_sqs_event(event)
    logger.info(
        "retry_processor_invocation_complete",
        request_id=getattr(context, "aws_request_id", None),
        failed_items=len(response["batchItemFailures"]),
    )
    return response


def main(poll_interval_seconds: float = 1.0):
    """Poll the retry queue until interrupted."""
    pipeline = get_signup_pipeline()
    logger.info("retry_worker_startup", poll_interval_seconds=poll_interval_seconds)
    try:
        while True:
            report = pipeline.worker.run_once()
            if report.processed == 0:
                time.sleep(poll_interval_seconds)
    except KeyboardInterrupt:
        logger.info("retry_worker_shutdown")


if __name__ == "__main__":
    main()
