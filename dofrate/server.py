#!/usr/bin/env python
# -*- coding: utf-8 -*-

#----------------------------------------------------------------------------------------------------------------------------------
# includes

# standards
from html import escape
from io import BytesIO
import logging

# 3rd parties
from flask import Flask, Response, jsonify, redirect, request, send_file

# dofrate
from .config import DEFAULT_CONFIG
from .store import FAVICON_KEY, load_reading

#----------------------------------------------------------------------------------------------------------------------------------

HTML_TEMPLATE = '''<!DOCTYPE html>
<html lang="es">
<head>
<meta charset="UTF-8">
<title>Tipo de cambio</title>
</head>
<body>
<p class="tipo-de-cambio">%(price)s</p>
<p class="ultima-actualizacion">%(date)s</p>
</body>
</html>
'''

NOT_MODIFIED_HEADERS = {
    'Vary': 'Accept-Encoding',
    'Cache-Control': 'no-store',
}

#----------------------------------------------------------------------------------------------------------------------------------

def create_app(store, updater, config=DEFAULT_CONFIG):
    """
    Builds the Flask app that serves whatever `store` holds. `updater` is only used by the manual trigger, /actualizar.
    """
    app = Flask(__name__, static_folder=None)
    canonical_path = config.canonical_path
    base_path = canonical_path.rsplit('.', 1)[0]

    def text(body, status):
        return Response(body, status=status, mimetype='text/plain')

    @app.before_request
    def only_get():
        if request.method != 'GET':
            logging.warning("Method not allowed: %s %s", request.method, request.path)
            return Response("Method not allowed", status=405, mimetype='text/plain', headers={'Allow': 'GET'})
        return None

    def serve_reading(render):
        reading = load_reading(store)
        if reading is None:
            return text("No rate available yet", 503)
        since = request.if_modified_since
        if since is not None and reading.observed_at <= since:
            return Response(status=304, headers=NOT_MODIFIED_HEADERS)
        response = render(reading)
        response.last_modified = reading.observed_at
        return response

    @app.route(canonical_path)
    def reading_html():
        return serve_reading(lambda reading: Response(
            HTML_TEMPLATE % {
                'price': escape(reading.price),
                'date': escape(reading.observed_at.strftime('%d/%m/%Y')),
            },
            mimetype='text/html',
        ))

    @app.route(base_path + '.json')
    def reading_json():
        return serve_reading(lambda reading: jsonify(reading.to_json()))

    @app.route('/')
    @app.route(base_path)
    def to_canonical():
        return redirect(request.host_url.rstrip('/') + canonical_path, 302)

    @app.route('/favicon.ico')
    def favicon():
        data = store.get(FAVICON_KEY)
        if data is None:
            return text("No favicon", 404)
        return send_file(BytesIO(data), mimetype='image/png')

    @app.route('/actualizar')
    def update():
        result = updater.update()
        if result.is_ok:
            return text("Rate updated: %s" % result.price, 200)
        else:
            return text("Update failed: %s" % result.reason, 500)

    @app.route('/<path:unknown>')
    def not_allowed(unknown):
        logging.warning("URL not allowed: /%s", unknown)
        return text("URL not allowed", 403)

    return app

#----------------------------------------------------------------------------------------------------------------------------------
