import logging

from aiobotocore.session import get_session

from querysense.domain import AnalyzedQuery
from querysense.serialization import report_to_json

logger = logging.getLogger(__name__)


class SqsReportOutput:
    def __init__(self, queue_url: str, region: str = "us-east-1") -> None:
        self._queue_url = queue_url
        self._region = region
        self._session = get_session()

    @property
    def name(self) -> str:
        return "sqs"

    async def send(self, analyzed: AnalyzedQuery) -> None:
        async with self._session.create_client("sqs", region_name=self._region) as client:
            await client.send_message(
                QueueUrl=self._queue_url,
                MessageBody=report_to_json(analyzed),
            )
        logger.debug("Sent report to %s", self._queue_url)
