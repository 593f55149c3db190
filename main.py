"""Main entry point for the Cultivation Workflow Scheduler."""

import argparse
import json
import logging
import sys
from datetime import date
from pathlib import Path

from cultivation_scheduler.engine.scheduler import SchedulingEngine
from cultivation_scheduler.errors import SchedulingError
from cultivation_scheduler.models.task import WorkflowTask
from cultivation_scheduler.planning.generator import WorkflowTaskGenerator
from cultivation_scheduler.utils.config import get_default_config, load_config, load_request
from cultivation_scheduler.utils.logging_utils import setup_logging

logger = logging.getLogger(__name__)


def _load_config(config_path: str) -> dict:
    if config_path and Path(config_path).exists():
        return load_config(config_path)
    return get_default_config()


def _load_tasks(tasks_path: str):
    with open(tasks_path, 'r') as f:
        data = json.load(f)
    return [WorkflowTask.from_dict(item) for item in data]


def run_scheduling(
    config_path: str,
    request_path: str,
    tasks_path: str = None,
    start_date: str = None,
    room_count: int = None,
    results_dir: str = "results",
):
    """Generate (or load) tasks for a request and write a schedule proposal."""
    config = _load_config(config_path)
    request = load_request(request_path)

    if tasks_path:
        tasks = _load_tasks(tasks_path)
    else:
        tasks = WorkflowTaskGenerator(config).generate_workflow_tasks(request)

    engine = SchedulingEngine(config)
    start_date = start_date or date.today().isoformat()
    proposal = engine.create_schedule_proposal(tasks, request, start_date)

    if room_count is None:
        room_count = config.get('scheduling', {}).get('room_count', 0)
    if room_count:
        rooms = engine.distribute_across_rooms(proposal.scheduled_tasks, room_count)
        logger.info("Distributed %d tasks across %d rooms", len(rooms), room_count)
    else:
        rooms = None

    print(f"\nScheduling completed for request {request.request_id}")
    print(f"Scheduled {len(proposal.scheduled_tasks)} tasks over {proposal.total_days} days")
    print(f"Confidence: {proposal.confidence}")
    for factor in proposal.risk_factors:
        print(f"  Risk: {factor}")

    # Save proposal
    output_dir = Path(results_dir)
    output_dir.mkdir(exist_ok=True)

    data = proposal.to_dict()
    if rooms is not None:
        data['room_assignments'] = {task.task_id: task.room for task in rooms}

    proposal_path = output_dir / f"proposal_{proposal.proposal_id}.json"
    with open(proposal_path, 'w') as f:
        json.dump(data, f, indent=2, default=str)

    # Save human-readable report
    log_path = output_dir / f"proposal_{proposal.proposal_id}.log"
    with open(log_path, 'w') as f:
        f.write(proposal.to_human_readable())

    print(f"\nProposal saved to: {proposal_path}")
    print(f"Human-readable report saved to: {log_path}")

    return proposal


def run_generate_tasks(config_path: str, request_path: str, results_dir: str = "results"):
    """Generate workflow tasks for a request and report validation issues."""
    config = _load_config(config_path)
    request = load_request(request_path)

    generator = WorkflowTaskGenerator(config)
    tasks = generator.generate_workflow_tasks(request)
    issues = generator.validate_tasks(tasks, request)

    print(f"Generated {len(tasks)} tasks")
    for issue in issues:
        print(f"  Issue: {issue}")

    output_dir = Path(results_dir)
    output_dir.mkdir(exist_ok=True)

    tasks_data = [
        {
            'task_id': t.task_id,
            'type': t.type,
            'species': t.species,
            'duration_hours': t.duration_hours,
            'labor_hours': t.labor_hours,
            'depends_on': list(t.depends_on),
            'equipment': list(t.equipment),
            'priority': t.priority,
            'rationale': t.rationale,
        }
        for t in tasks
    ]

    with open(output_dir / "generated_tasks.json", 'w') as f:
        json.dump(tasks_data, f, indent=2)

    print(f"Tasks saved to: {output_dir / 'generated_tasks.json'}")

    return tasks, issues


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Cultivation Workflow Scheduler"
    )
    parser.add_argument(
        'command',
        choices=['schedule', 'generate-tasks'],
        help='Command to run'
    )
    parser.add_argument(
        '--config',
        type=str,
        default='config.yaml',
        help='Path to configuration file (default: config.yaml)'
    )
    parser.add_argument(
        '--request',
        type=str,
        required=True,
        help='Path to workflow request file (YAML or JSON)'
    )
    parser.add_argument(
        '--tasks',
        type=str,
        default=None,
        help='Path to a JSON list of tasks to schedule instead of generating them'
    )
    parser.add_argument(
        '--start-date',
        type=str,
        default=None,
        help='Schedule start date, YYYY-MM-DD (default: today)'
    )
    parser.add_argument(
        '--rooms',
        type=int,
        default=None,
        help='Distribute unassigned tasks across this many rooms'
    )
    parser.add_argument(
        '--results-dir',
        type=str,
        default='results',
        help='Output directory (default: results)'
    )
    parser.add_argument(
        '--log-level',
        type=str,
        default='INFO',
        help='Logging level (default: INFO)'
    )

    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    try:
        if args.command == 'schedule':
            run_scheduling(
                args.config,
                args.request,
                tasks_path=args.tasks,
                start_date=args.start_date,
                room_count=args.rooms,
                results_dir=args.results_dir,
            )
        elif args.command == 'generate-tasks':
            run_generate_tasks(args.config, args.request, results_dir=args.results_dir)
    except (SchedulingError, FileNotFoundError) as e:
        logger.error("%s failed: %s", args.command, e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
