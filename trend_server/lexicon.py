POSITIVE_WORDS = frozenset([
    'good', 'great', 'excellent', 'amazing', 'awesome', 'fantastic', 'perfect',
    'love', 'wonderful', 'outstanding', 'superb', 'brilliant', 'best', 'nice',
    'happy', 'positive', 'success', 'win', 'winner', 'beautiful', 'cool',
    'impressive', 'recommend', 'enjoy', 'pleased', 'satisfied',
    'bravo', 'congrats', 'yay', 'yeah', 'yes', 'upvote', 'upvoted',
])

NEGATIVE_WORDS = frozenset([
    'bad', 'terrible', 'awful', 'horrible', 'worst', 'hate', 'dislike',
    'disappointing', 'poor', 'sucks', 'trash', 'garbage', 'waste', 'useless',
    'stupid', 'dumb', 'ridiculous', 'annoying', 'angry', 'sad', 'negative',
    'fail', 'failure', 'lose', 'loser', 'problem', 'issue', 'bug', 'broken',
    'crash', 'slow', 'expensive', 'overpriced', 'scam', 'fraud', 'downvote',
    'downvoted', 'delete', 'remove',
])
