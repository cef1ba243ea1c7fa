# routes/static.py
from flask import Blueprint, abort, current_app, send_from_directory
from pathlib import Path
import logging

static_bp = Blueprint('static_files', __name__)
logger = logging.getLogger(__name__)

def resolve_public_path(public_dir, filename):
    """Resolve `filename` inside `public_dir`, or None if it escapes the root or does not exist."""
    root = Path(public_dir).resolve()
    try:
        target = (root / filename).resolve()
    except (OSError, ValueError) as e:
        logger.warning(f"Rejected unresolvable path {filename!r}: {e}")
        return None
    if target != root and root not in target.parents:
        logger.warning(f"Rejected path outside public root: {filename}")
        return None
    if target.is_dir():
        target = target / 'index.html'
    if not target.is_file():
        return None
    return target.relative_to(root).as_posix()

@static_bp.route('/', defaults={'filename': 'index.html'}, methods=['GET'])
@static_bp.route('/<path:filename>', methods=['GET'])
def public_file(filename):
    public_dir = current_app.config['PUBLIC_DIR']
    relative = resolve_public_path(public_dir, filename)
    if relative is None:
        abort(404)
    return send_from_directory(str(Path(public_dir).resolve()), relative)
