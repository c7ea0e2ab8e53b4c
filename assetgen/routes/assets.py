import io
from flask import Blueprint, request, jsonify, current_app, send_file

from assetgen.extensions import csrf, limiter
from branding.validation import UploadedFile, ValidationError, validate_upload
from branding.transforms import AssetGenerationError, generate
from branding.packaging import ArchiveError, build_archive


bp = Blueprint('assets', __name__)
csrf.exempt(bp)


def _json_fail(status, summary):
    return jsonify(error=summary), status


def _read_upload():
    storage = request.files.get('file')
    if storage is None:
        return None
    data = storage.read()
    return UploadedFile(content_type=storage.mimetype, size=len(data), data=data)


@bp.route('/api/generate-assets', methods=['POST'])
@limiter.limit(lambda: current_app.config.get("GENERATE_RATELIMIT", "10/minute"))
def generate_assets():
    background_color = request.form.get('backgroundColor')
    include_splash = request.form.get('includeSplash') == 'true'
    app_name = request.form.get('appName') or current_app.config.get("DEFAULT_APP_NAME", "My App")

    try:
        upload = _read_upload()
    except OSError:
        current_app.logger.exception('Failed to read uploaded file')
        return _json_fail(400, 'Failed to read file data')

    try:
        source = validate_upload(upload, background_color)
    except ValidationError as e:
        current_app.logger.info('Rejected upload: %s', e.message)
        return _json_fail(e.status, e.message)

    try:
        assets = generate(source.image, background_color, include_splash)
    except AssetGenerationError:
        current_app.logger.exception('Asset generation failed')
        return _json_fail(500, 'Failed to process image assets')

    try:
        archive = build_archive(assets, background_color, app_name)
    except ArchiveError:
        current_app.logger.exception('Archive generation failed')
        return _json_fail(500, 'Failed to generate ZIP file')

    current_app.logger.info(
        'Generated assets for %r (%dx%d, splash=%s, %d bytes)',
        app_name, source.width, source.height, include_splash, len(archive),
    )
    return send_file(
        io.BytesIO(archive),
        mimetype='application/zip',
        as_attachment=True,
        download_name=current_app.config.get("ARCHIVE_FILENAME", "expo-assets.zip"),
    )
