import structlog

from celery import shared_task
from tours.services import CompetitionResultsService

logger = structlog.get_logger(__name__)


@shared_task(bind=True)
def finalize_competition(self, competition_id):
    logger.info("Background job: finalize competition results", competition_id=competition_id)
    result = CompetitionResultsService().finalize_competition_results(competition_id)
    return result.to_dict()
