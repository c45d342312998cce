import json
import logging
import os
import sys
from typing import Optional

import uvicorn
from fastapi import FastAPI, Header, HTTPException

import fnjudge.constants as constants

from .judge import judge, total_score
from .models import EvaluationRequest
from .test_case_manager import TaskNotFoundError, TestCaseManager
from .verdict import Verdict

logger = logging.getLogger(__name__)

app = FastAPI()


@app.get('/ping')
def ping():
    return {'success': True}


@app.post('/evaluate')
def evaluate_submission(evaluation_request: EvaluationRequest,
                        x_auth_token: Optional[str] = Header(None)):
    if x_auth_token != constants.CONFIG['secret_key']:
        return {'success': False}

    task_id = evaluation_request.task_id
    try:
        task_info = TestCaseManager.get_task_info(task_id)
    except TaskNotFoundError:
        raise HTTPException(status_code=404, detail=f'Task {task_id} not found')
    except ValueError as e:  # includes pydantic.ValidationError
        logger.error(f'task {task_id}: invalid task info: {e}')
        raise HTTPException(status_code=400, detail=f'Task {task_id} is invalid')

    try:
        result = judge(evaluation_request.source_code,
                       task_info,
                       TestCaseManager.iter_test_cases(task_id),
                       evaluation_request.function_name)
    except ValueError as e:
        logger.error(f'task {task_id}: invalid test case: {e}')
        raise HTTPException(status_code=400, detail=f'Task {task_id} has an invalid test case')

    if isinstance(result, Verdict):
        logger.info(f'task {task_id}: verdict {result.name}')
        return {'success': True, 'verdict': result}

    score = total_score(result)
    logger.info(f'task {task_id}: score {score.achieved}/{score.maximum}')
    return {
        'success': True,
        'score': score.achieved,
        'max_score': score.maximum,
        'test_case_results': [r.to_dict() for r in result]
    }


def main():
    if len(sys.argv) >= 2:
        constants.DEBUG = True

    logging.basicConfig(
        level=logging.DEBUG if constants.DEBUG else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(),
            logging.FileHandler("debug.log")
        ],
        force=True
    )

    if not os.path.exists('config.json'):
        logger.error('Please add a config.json file. Aborting.')
        sys.exit(1)
    with open('config.json') as f:
        constants.CONFIG = json.load(f)
    constants.TASKS_DIR = constants.CONFIG.get('tasks_dir', constants.TASKS_DIR)

    uvicorn.run(app, port=constants.CONFIG.get('port', 8000), host=constants.CONFIG.get('host', '0.0.0.0'))


if __name__ == '__main__':
    main()
