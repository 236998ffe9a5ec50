"""
Logging utilities for tracking user activity across the site.
Activity lines go to the 'app.activity' logger.
"""

import logging

activity_logger = logging.getLogger("app.activity")


def log_project_event(project_name, category, description):
    """
    Record one activity line for a project.

    Args:
        project_name (str): The project identifier (e.g., 'tic_tac_toe')
        category (str): Short event category (e.g., 'Visit', 'Move')
        description (str): Human-readable description of the event
    """
    activity_logger.info(f"[{project_name}] {category}: {description}")


def log_project_visit(project_name, project_display_name=None):
    """
    Log a visit to a project/page.
    
    Args:
        project_name (str): The project identifier (e.g., 'tic_tac_toe')
        project_display_name (str, optional): Human-readable name for the description.
                                              Defaults to project_name if not provided.
    """
    display_name = project_display_name or project_name
    log_project_event(project_name, 'Visit', f"Anonymous user visited {display_name}")
