# assetgen/routes/main.py
from flask import Blueprint, current_app, render_template

from branding.transforms import ASSET_FILENAMES

bp = Blueprint('main', __name__)


@bp.route('/')
def index():
    return render_template(
        'index.html',
        default_color=current_app.config.get("DEFAULT_BACKGROUND_COLOR", "#FFFFFF"),
        default_app_name=current_app.config.get("DEFAULT_APP_NAME", "My App"),
        asset_names=list(ASSET_FILENAMES.values()),
    )
