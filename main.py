import argparse
from datetime import date

from lifestyle.app import create_app
from lifestyle.adaptors import BackendAdaptor
from lifestyle.config import DEFAULT_USER_ID, setup_logger
from lifestyle.scoring import evaluate_goal
from lifestyle.services import TaskLogService, MomentumService
from lifestyle.utils import parse_iso_date


def run_local(args, logger):
    app = create_app()
    target_date = parse_iso_date(args.date) or date.today()

    with app.app_context():
        service = TaskLogService()
        if args.generate_logs:
            generated = service.generate_task_logs_for_date(target_date)
            logger.info(f"Generated {generated} task logs for {target_date}")
        if args.mark_overdue:
            missed = service.mark_overdue_tasks_as_missed(target_date)
            logger.info(f"Marked {missed} task logs as missed before {target_date}")
        if not (args.generate_logs or args.mark_overdue):
            result = service.ensure_task_logs_up_to_date(target_date)
            logger.info(f"Task logs up to date: {result}")

        if args.scores:
            for goal, result in MomentumService().score_user_goals(args.user):
                logger.info(f"{goal.title}: {result.score} ({result.label})")


def run_remote(args, logger):
    backend = BackendAdaptor(logger=logger)
    target_date = parse_iso_date(args.date)

    if args.generate_logs:
        backend.generate_task_logs_for_date(target_date)
    if args.mark_overdue:
        backend.mark_overdue_tasks_as_missed()
    if not (args.generate_logs or args.mark_overdue):
        backend.ensure_task_logs_up_to_date()

    if args.scores:
        for goal in backend.fetch_goals(args.user):
            result = evaluate_goal(goal)
            logger.info(f"{goal.title}: {result.score} ({result.label})")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Lifestyle execution tracker maintenance")
    parser.add_argument("--generate-logs", action="store_true", help="Create pending task logs for the date")
    parser.add_argument("--mark-overdue", action="store_true", help="Mark pending logs due before the date as missed")
    parser.add_argument("--scores", action="store_true", help="Print momentum scores for the user's goals")
    parser.add_argument("--date", help="Target date (YYYY-MM-DD), defaults to today")
    parser.add_argument("--user", default=DEFAULT_USER_ID, help="Owner of the goals to score")
    parser.add_argument("--remote", action="store_true", help="Run against the hosted backend instead of the local database")
    args = parser.parse_args()

    logger = setup_logger(name="Maintenance")
    if args.remote:
        run_remote(args, logger)
    else:
        run_local(args, logger)
