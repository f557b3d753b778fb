from flask import Flask, request, jsonify
from flask_cors import CORS
from comp_engine import StatementProcessor
import os
import logging

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = Flask(__name__)

# Enable CORS for all routes (the statement dashboard calls the API from the browser)
CORS(app)

# Initialize the statement processor
processor = StatementProcessor()


@app.route("/api", methods=["GET"])
def api_info():
    """API information endpoint"""
    return jsonify({
        "status": "ok",
        "message": "Commission Statement Engine API",
        "version": "1.0",
        "endpoints": {
            "calculate_statement": "/calculate_statement [POST]",
            "health": "/health [GET]"
        }
    }), 200


@app.route("/health", methods=["GET"])
def health():
    """Health check for monitoring"""
    return jsonify({"status": "healthy"}), 200


@app.route("/calculate_statement", methods=["POST"])
def calculate_statement():
    """
    Calculate a rep's commission statement from already-fetched records
    """
    try:
        # Get input data
        input_data = request.get_json(force=True, silent=True)

        if not input_data:
            return jsonify({
                "error": "No input data provided",
                "status": "failed"
            }), 400

        # Log request
        statement = input_data.get('statement') if isinstance(input_data, dict) else None
        rep_name = (statement.get('rep_name') if isinstance(statement, dict) else None) or 'Unknown'
        logger.info(f"Calculating statement: {rep_name}")

        # Process through engine
        result = processor.process_from_dict(input_data)

        logger.info(f"Statement calculated successfully: {rep_name}")

        return jsonify(result), 200

    except (ValueError, KeyError, TypeError) as e:
        # Validation errors from engine
        logger.error(f"Validation error: {str(e)}")
        return jsonify({
            "error": str(e),
            "status": "validation_failed"
        }), 400

    except Exception as e:
        # Unexpected errors
        logger.error(f"Processing error: {str(e)}")
        return jsonify({
            "error": str(e),
            "status": "failed"
        }), 500


if __name__ == "__main__":
    port = int(os.environ.get("PORT", 8080))
    app.run(host="0.0.0.0", port=port, debug=False)
