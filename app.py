from flask import Flask, render_template, request, redirect, url_for, session, jsonify, abort
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from flask_talisman import Talisman
import os
import traceback

from catalog import default_catalog, CategoryNotFoundError
from selection import (
    Selection, load_selection, save_selection, select_topic, select_category
)
from sidebar import build_sidebar, build_navbar, sidebar_payload
from topic_view import explanation_blocks, topic_sections
from utils import (
    logger, configure_logging, CacheManager, cached, validate_schema,
    topic_selection_schema, category_selection_schema
)
from config import config

# Initialize Flask app with configuration
env = os.environ.get('FLASK_ENV', 'production')
app = Flask(__name__)
app.json.sort_keys = False  # keep catalog order in API responses
config[env].init_app(app)
configure_logging(app.config['LOG_LEVEL'])
CacheManager.default_timeout = app.config['CACHE_DEFAULT_TIMEOUT']

# Dedicated CSS endpoint with explicit MIME type
@app.route('/styles.css')
def serve_css():
    from flask import send_from_directory
    return send_from_directory('static', 'styles.css', mimetype='text/css')

# Initialize rate limiter
disable_rate_limits = (
    env in ('development', 'testing') or
    os.environ.get('DISABLE_RATE_LIMITS', 'False').lower() == 'true'
)
limiter = Limiter(
    app=app,
    key_func=get_remote_address,
    default_limits=[app.config['RATE_LIMIT_DEFAULT']],
    enabled=(not disable_rate_limits),
    storage_uri="memory://"
)
# Initialize security headers with Talisman
Talisman(app,
    force_https=app.config['SESSION_COOKIE_SECURE'],
    session_cookie_secure=app.config['SESSION_COOKIE_SECURE'],
    strict_transport_security=True,
    strict_transport_security_max_age=31536000,
    content_security_policy={
        'default-src': "'self'",
        'style-src': "'self'",
        'img-src': ["'self'", "data:", "https:"],
    },
    referrer_policy='strict-origin-when-cross-origin'
)

# ============================================================================
# TOPIC CATALOG
# Built once at startup, read-only afterwards
# ============================================================================
CATALOG = default_catalog()
logger.info("catalog_loaded",
            categories=len(CATALOG),
            topics=sum(len(c.topics) for c in CATALOG.values()))

# ============================================================================
# SELECTION HELPERS
# ============================================================================

def _current_selection() -> Selection:
    return load_selection(session, CATALOG,
                          app.config['DEFAULT_CATEGORY'],
                          app.config['DEFAULT_TOPIC_ID'])

def _store_selection(selection: Selection):
    save_selection(session, selection)
    logger.selection_event("selection_changed",
                           category=selection.active_category,
                           topic_id=selection.active_topic_id)

def _on_topic_change(topic_id: str, category=None):
    """Sidebar click handler: the session owns the selection"""
    current = _current_selection()
    if category and category != current.active_category:
        current = Selection(category)
    _store_selection(select_topic(current, topic_id))

def _require_category(key):
    if key not in CATALOG:
        raise CategoryNotFoundError(key)
    return CATALOG[key]

def _wants_json() -> bool:
    return request.is_json or request.path.startswith('/api/')

def _render_topic_page(selection: Selection):
    if selection.active_category is None:
        # empty catalog: nothing to list or show
        return render_template('index.html', navbar=[], sidebar_rows=[], selection=selection,
                               category=None, topic=None, sections=[], explanation=[])
    # Raises CategoryNotFoundError for an unknown category (handled as 404)
    sidebar_rows = build_sidebar(CATALOG, selection.active_category, selection.active_topic_id)
    topic = CATALOG.find_topic(selection.active_category, selection.active_topic_id)
    context = {
        'navbar': build_navbar(CATALOG, selection.active_category),
        'sidebar_rows': sidebar_rows,
        'selection': selection,
        'category': CATALOG[selection.active_category],
        'topic': topic,
        'sections': topic_sections(topic) if topic else [],
        'explanation': explanation_blocks(topic.explanation) if topic else [],
    }
    return render_template('index.html', **context)

@app.context_processor
def inject_layout_globals():
    return {
        'theme': session.get('theme', app.config['DEFAULT_THEME']),
        'contact_email': app.config['CONTACT_EMAIL'],
    }

# ============================================================================
# PAGES
# ============================================================================

@app.route('/')
def index():
    return _render_topic_page(_current_selection())

@app.route('/topics/<category>')
def category_page(category):
    _require_category(category)
    selection = select_category(_current_selection(), CATALOG, category)
    _store_selection(selection)
    if selection.active_topic_id is None:
        return _render_topic_page(selection)
    return redirect(url_for('topic_page', category=category, topic_id=selection.active_topic_id))

@app.route('/topics/<category>/<topic_id>')
def topic_page(category, topic_id):
    _require_category(category)
    selection = select_topic(Selection(category), topic_id)
    if selection != _current_selection():
        _store_selection(selection)
    return _render_topic_page(selection)

@app.route('/select/topic', methods=['POST'])
@limiter.limit("120 per minute")
def select_topic_route():
    is_valid, data = validate_schema(topic_selection_schema, request.form.to_dict())
    if not is_valid:
        logger.warning("invalid_topic_selection", errors=data)
        abort(400)
    category = data.get('category')
    if category:
        _require_category(category)
    _on_topic_change(data['topic_id'], category)
    selection = _current_selection()
    if selection.active_category is None:
        return redirect(url_for('index'))
    return redirect(url_for('topic_page',
                            category=selection.active_category,
                            topic_id=selection.active_topic_id))

@app.route('/select/category', methods=['POST'])
@limiter.limit("120 per minute")
def select_category_route():
    is_valid, data = validate_schema(category_selection_schema, request.form.to_dict())
    if not is_valid:
        logger.warning("invalid_category_selection", errors=data)
        abort(400)
    _require_category(data['category'])
    return redirect(url_for('category_page', category=data['category']))

@app.route('/theme', methods=['POST'])
def toggle_theme():
    current = session.get('theme', app.config['DEFAULT_THEME'])
    session['theme'] = 'light' if current == 'dark' else 'dark'
    return redirect(url_for('index'))

@app.route('/contact')
def contact():
    return render_template('contact.html')

# ============================================================================
# JSON API
# ============================================================================

@app.route('/api/categories')
def api_categories():
    categories = [
        {'key': key, 'name': category.name, 'topic_count': len(category.topics)}
        for key, category in CATALOG.items()
    ]
    return jsonify({'categories': categories})

@app.route('/api/catalog')
def api_catalog():
    return jsonify(CATALOG.as_dict())

@app.route('/api/sidebar/<category>')
def api_sidebar(category):
    active = request.args.get('active')
    rows = build_sidebar(CATALOG, category, active)
    return jsonify({'category': category, 'active_topic_id': active, 'rows': sidebar_payload(rows)})

@cached(prefix='topic_payload')
def _topic_payload(category, topic_id):
    topic = CATALOG.find_topic(category, topic_id)
    if topic is None:
        return None
    payload = topic.to_dict()
    payload['category'] = category
    return payload

@app.route('/api/topics/<category>/<topic_id>')
def api_topic(category, topic_id):
    _require_category(category)
    payload = _topic_payload(category, topic_id)
    if payload is None:
        abort(404)
    return jsonify(payload)

# ============================================================================
# ERROR HANDLERS

# ============================================================================
@app.errorhandler(CategoryNotFoundError)
def category_not_found(error):
    """Unknown category keys surface as 404"""
    logger.warning("category_not_found", category=error.key, path=request.path)
    if _wants_json():
        return jsonify({'error': 'Not found', 'message': str(error)}), 404
    return render_template('error.html', error_code=404, error_message="Category not found"), 404
@app.errorhandler(400)
def bad_request(error):
    """Handle bad request errors"""
    logger.warning("bad_request", error=str(error), path=request.path)
    if _wants_json():
        return jsonify({'error': 'Bad request', 'message': str(error)}), 400
    return render_template('error.html', error_code=400, error_message="Bad request"), 400
@app.errorhandler(404)
def not_found(error):
    """Handle 404 errors"""
    logger.warning("page_not_found", path=request.path, ip=request.remote_addr)
    if _wants_json():
        return jsonify({'error': 'Not found', 'message': 'Resource not found'}), 404
    return render_template('error.html', error_code=404, error_message="Page not found"), 404
@app.errorhandler(429)
def rate_limit_handler(error):
    """Handle rate limit exceeded"""
    logger.security_event("rate_limit_exceeded", ip_address=request.remote_addr, path=request.path)
    if _wants_json():
        return jsonify({'error': 'Too many requests', 'message': 'Rate limit exceeded. Please try again later.'}), 429
    return render_template('error.html', error_code=429, error_message="Too many requests. Please try again later."), 429
@app.errorhandler(500)
def internal_error(error):
    """Handle internal server errors"""
    logger.error("internal_server_error", error=str(error), path=request.path, traceback=traceback.format_exc())
    if _wants_json():
        return jsonify({'error': 'Internal server error', 'message': 'Something went wrong'}), 500
    return render_template('error.html', error_code=500, error_message="Internal server error"), 500

# ============================================================================
# REQUEST LOGGING

# ============================================================================
@app.before_request
def log_request():
    """Log all incoming requests"""
    logger.debug("request_started",
                 method=request.method,
                 path=request.path,
                 ip=request.remote_addr,
                 user_agent=str(request.user_agent))
@app.after_request
def log_response(response):
    """Log all responses"""
    logger.info("request_completed",
                method=request.method,
                path=request.path,
                status_code=response.status_code,
                ip=request.remote_addr)
    return response
if __name__ == '__main__':
    env = os.environ.get('FLASK_ENV', 'production')
    debug = env == 'development'
    logger.info("application_startup", environment=env, debug=debug)
    app.run(debug=debug, host='0.0.0.0', port=5000)
