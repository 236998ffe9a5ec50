"""
Games shown on the site's home and category pages.
Categories link to a listing page; games name their category in 'parent'.
"""

PROJECTS = [
    {
        'id': 'simple_games',
        'name': 'Simple Games',
        'description': 'Basic versions of some classic games',
        'url': '/games',
        'type': 'category',
        'icon': '🎮',
        'order': 1
    },
    {
        'id': 'tic_tac_toe',
        'name': 'Tic-Tac-Toe',
        'description': 'Classic X and O, with a move history you can jump back through',
        'url': '/tic-tac-toe',
        'type': 'project',
        'parent': 'simple_games',
        'order': 101  # Sub-order within parent
    },
]


def get_project_by_id(project_id):
    """Registry entry with this id, or None."""
    return next((p for p in PROJECTS if p['id'] == project_id), None)


def get_homepage_items():
    """Top-level entries in display order; games listed under a category are left out."""
    return sorted((p for p in PROJECTS if not p.get('parent')), key=lambda p: p['order'])


def get_children_of_category(category_id):
    """Games belonging to a category, in display order."""
    return sorted((p for p in PROJECTS if p.get('parent') == category_id), key=lambda p: p['order'])
