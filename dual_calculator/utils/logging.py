"""
Logging utilities for tracking visitor activity.
"""

import logging

from flask import request

logger = logging.getLogger('dual_calculator.activity')


def log_project_visit(project_name, project_display_name=None):
    """
    Log a visit to a calculator tab.

    Args:
        project_name (str): The calculator identifier (e.g., 'bmi', 'calculator')
        project_display_name (str, optional): Human-readable name for the message.
                                              Defaults to project_name if not provided.
    """
    display_name = project_display_name or project_name
    visitor = request.remote_addr or "unknown address"

    logger.info(f"Anonymous user ({visitor}) visited {display_name}")
