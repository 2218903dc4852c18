import json
import logging
from concurrent.futures import ThreadPoolExecutor

from flask import Flask, request, jsonify

from . import config
from .cache import ResultCache, make_cache_key
from .fetcher import fetch_sentiment
from .models import ComparisonResult
from .scorer import NEUTRAL_SCORE

CORS_PREFLIGHT_HEADERS = {
    'Access-Control-Allow-Origin': '*',
    'Access-Control-Allow-Headers': 'Content-Type',
    'Access-Control-Allow-Methods': 'POST, OPTIONS',
}


def json_response(body, status=200):
    response = jsonify(body)
    response.status_code = status
    response.headers['Access-Control-Allow-Origin'] = '*'
    return response


def fetch_pair(fetch, trend1, trend2, logger):
    """Score both topics in parallel and wait for both, whatever either outcome."""
    with ThreadPoolExecutor(max_workers=2) as executor:
        futures = [executor.submit(fetch, trend1), executor.submit(fetch, trend2)]

    scores = []
    for trend, future in zip((trend1, trend2), futures):
        error = future.exception()
        if error is not None:
            logger.error("Sentiment fetch for %r failed: %s", trend, error)
            scores.append(NEUTRAL_SCORE)
        else:
            scores.append(future.result())
    return scores


def create_app(cache=None, fetch=None):
    app = Flask(__name__)
    app.config['RESULT_CACHE'] = cache if cache is not None else ResultCache()
    app.config['SENTIMENT_FETCH'] = fetch if fetch is not None else fetch_sentiment

    @app.errorhandler(405)
    def method_not_allowed(error):
        return json_response({"error": "Method Not Allowed"}, 405)

    @app.route('/', methods=['POST', 'OPTIONS'])
    @app.route('/api/compare', methods=['POST', 'OPTIONS'])
    def compare():
        if request.method == 'OPTIONS':
            return '', 200, CORS_PREFLIGHT_HEADERS

        result_cache = app.config['RESULT_CACHE']

        try:
            payload = json.loads(request.get_data(as_text=True))
            if not isinstance(payload, dict):
                payload = {}

            trend1 = payload.get('trend1')
            trend2 = payload.get('trend2')
            force_refresh = bool(payload.get('forceRefresh', False))

            if not trend1 or not trend2:
                return json_response({"error": "Both trends are required"}, 400)

            cache_key = make_cache_key(trend1, trend2)
            now = result_cache.now_ms()

            if not force_refresh:
                entry = result_cache.get_fresh(cache_key, now)
                if entry is not None:
                    app.logger.info("Serving cached comparison for %s", cache_key)
                    return json_response(entry.data.as_cached(result_cache.expiry_of(entry)))

            sentiment1, sentiment2 = fetch_pair(
                app.config['SENTIMENT_FETCH'], trend1, trend2, app.logger)

            result = ComparisonResult(
                trend1=trend1,
                trend2=trend2,
                sentiment1=sentiment1,
                sentiment2=sentiment2,
                cached=False,
                timestamp=now,
                next_refresh=now + result_cache.ttl_ms,
            )

            result_cache.put(cache_key, result, now)
            result_cache.sweep()

            return json_response(result.to_dict())

        except Exception as e:
            app.logger.exception("Error comparing trends")
            return json_response({"error": "Internal server error", "details": str(e)}, 500)

    return app


app = create_app()


if __name__ == '__main__':
    logging.basicConfig(level=config.LOG_LEVEL)
    app.run(debug=True, port=config.PORT)
