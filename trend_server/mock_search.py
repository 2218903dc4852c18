import logging

from flask import Flask, request, jsonify

from . import config

mock_search = Flask(__name__)

SAMPLE_POSTS = [
    {"title": "Cats are awesome and I love them", "selftext": "Best decision I ever made."},
    {"title": "My cat knocked everything off the table", "selftext": "So annoying, but still cute."},
    {"title": "Dogs vs cats: which is the better pet?", "selftext": ""},
    {"title": "Great dog park recommendations?", "selftext": "Looking for a nice place nearby."},
    {"title": "My dog ate my homework", "selftext": "Terrible excuse, worst day ever."},
    {"title": "Python 3.13 release is impressive", "selftext": "The new REPL is really cool."},
    {"title": "Python packaging is a problem", "selftext": "Broken builds and slow installs."},
]


def listing(posts):
    return {
        "kind": "Listing",
        "data": {"children": [{"kind": "t3", "data": post} for post in posts]},
    }


@mock_search.route('/search.json', methods=['GET'])
def search():
    query = request.args.get('q', '').lower()
    limit = request.args.get('limit', default=25, type=int)

    words = query.split()
    matches = [
        post for post in SAMPLE_POSTS
        if words and all(word.rstrip('s') in f"{post['title']} {post['selftext']}".lower() for word in words)
    ]

    return jsonify(listing(matches[:limit]))


if __name__ == '__main__':
    logging.basicConfig(level=config.LOG_LEVEL)
    mock_search.run(debug=True, port=config.MOCK_SEARCH_PORT)
