#!/usr/bin/env python3
"""
Flask web application exposing the entropy_data read path.
"""

import sys
from flask import Flask, request, jsonify
from entropy_engine.errors import DecodeError, ParameterError
from entropy_engine.handler import EntropyDataHandler
from entropy_engine.index_reader import IndexReader
from entropy_engine.paths import LEXICON_PATH, LIVE_DOCS_PATH


def create_app(reader=None):
    """Build the app around an already-open IndexReader (None = not initialized yet)."""
    app = Flask(__name__)
    app.config["ENTROPY_HANDLER"] = EntropyDataHandler(reader) if reader is not None else None

    @app.route('/entropy_data', methods=['GET'])
    def entropy_data():
        """Serve one page of entropy records for a partition."""
        handler = app.config["ENTROPY_HANDLER"]
        if handler is None:
            return jsonify({'error': 'Entropy index not initialized'}), 500

        try:
            return jsonify(handler.handle(request.args))
        except (ParameterError, DecodeError) as e:
            print(f"[app] bad entropy_data request: {e}", file=sys.stderr)
            return jsonify({'error': str(e)}), 400

    @app.route('/health')
    def health():
        """Health check endpoint."""
        handler = app.config["ENTROPY_HANDLER"]
        return jsonify({
            'status': 'healthy',
            'reader_initialized': handler is not None,
            'version': EntropyDataHandler.version,
        })

    return app


def initialize_reader(lexicon_path=LEXICON_PATH, live_docs_path=LIVE_DOCS_PATH):
    """Open the on-disk entropy index; None if it cannot be loaded."""
    try:
        print("Opening entropy index...")
        reader = IndexReader.open(lexicon_path, live_docs_path)
        print("Entropy index opened successfully")
        return reader
    except (OSError, EOFError) as e:
        print(f"Error opening entropy index: {e}", file=sys.stderr)
        return None


if __name__ == '__main__':
    app = create_app(initialize_reader())
    app.run(debug=True, host='0.0.0.0', port=5001)
