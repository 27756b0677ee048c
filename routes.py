import logging
import traceback
from flask import request, jsonify, current_app
from werkzeug.utils import secure_filename
from analysis_pipeline import AnalysisError, analyze

def register_routes(app):
    """Register all routes with the Flask app"""

    @app.route('/api/analyze', methods=['POST'])
    def api_analyze_file():
        """API endpoint to analyze one uploaded file"""
        file = request.files.get('file')

        if not file or not file.filename:
            return jsonify({
                'status': 'error',
                'message': 'No file provided'
            }), 400

        content = file.read()
        logging.info(f"File received: name={secure_filename(file.filename)}, type={file.mimetype}, size={len(content)}")

        try:
            result = analyze(content, file.mimetype or '', file.filename)
        except AnalysisError as e:
            logging.error(f"Analysis error: {str(e)}")
            payload = {
                'status': 'error',
                'message': str(e)
            }
            if current_app.config.get('SHOW_ERROR_DETAILS'):
                payload['details'] = traceback.format_exc()
            return jsonify(payload), 500

        # File metadata is attached after the analysis, never passed into it
        response = result.to_dict()
        response['fileInfo'] = {
            'name': file.filename,
            'type': file.mimetype,
            'size': len(content),
            'lastModified': request.form.get('lastModified', type=int)
        }
        return jsonify(response)
