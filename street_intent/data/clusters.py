"""Concept clusters and word importance weights for the semantic vector space.

Each cluster is one dimension of the phrase vector space. Member words are
canonical, post-normalization forms; a word may sit in several clusters and
contributes its full importance weight to each of them.
"""

WORD_CLUSTERS: dict[str, list[str]] = {
    "money": [
        "money", "dollars", "earn", "earning", "earnings", "income", "profit",
        "profitable", "rich", "wealthy", "broke", "poor", "paid", "pay",
        "paying", "payout", "payment", "funds", "fortune", "wealth", "afford",
        "desperate", "bail",
    ],
    "crime": [
        "crime", "crimes", "steal", "stealing", "theft", "robbery", "rob",
        "burglary", "heist", "heists", "criminal", "illegal", "pickpocket",
        "mugging", "shoplifting", "carjack", "fraud", "commit", "targets",
    ],
    "violence": [
        "attack", "fight", "weapon", "weapons", "gun", "knife", "assault",
        "hurt", "damage", "kill", "murder", "violent", "dangerous", "threat",
    ],
    "police": [
        "police", "arrest", "arrested", "wanted", "heat", "caught", "bust",
        "investigation", "detective", "officer", "watched", "cool", "hiding",
        "undetected", "fleeing", "lay", "low",
    ],
    "jail": [
        "jail", "prison", "bail", "sentence", "lawyer", "parole", "arrested",
        "escape", "court", "locked",
    ],
    "location": [
        "downtown", "uptown", "district", "districts", "area", "neighborhood",
        "territory", "zone", "place", "location", "region", "city", "parkdale",
        "scarborough", "yorkville", "kensington", "travel", "far", "where",
    ],
    "time": [
        "time", "now", "soon", "wait", "waiting", "fast", "slow", "hour",
        "minute", "day", "daily", "night", "morning", "evening", "afternoon",
        "next", "routine", "rest", "sleep", "priority", "prioritize",
        "important", "spend",
    ],
    "status": [
        "status", "stats", "health", "energy", "level", "experience",
        "progress", "rank", "condition", "situation", "state", "reputation",
        "rundown", "report", "doing", "stand", "current",
    ],
    "equipment": [
        "gear", "equipment", "tool", "tools", "item", "items", "weapon",
        "weapons", "lockpick", "lockpicks", "disguise", "inventory", "upgrade",
        "supplies", "armor", "stuff", "gun", "guns", "knife",
    ],
    "social": [
        "crew", "team", "partner", "ally", "allies", "friend", "friends",
        "enemy", "enemies", "connection", "connections", "contact",
        "associate", "trust", "loyalty", "relationship", "relationships",
        "members", "member", "recruit", "hire", "others", "character",
        "likes", "people", "split",
    ],
    "action": [
        "do", "make", "making", "get", "take", "go", "find", "help", "show",
        "tell", "give", "start", "stop", "try", "want", "need", "become",
    ],
    "question": [
        "what", "how", "where", "when", "why", "which", "who", "should",
        "could", "would", "can", "will",
    ],
    "quality": [
        "best", "good", "bad", "better", "worse", "easy", "hard", "harder",
        "safe", "safest", "risky", "risk", "fast", "fastest", "slow", "high",
        "highest", "low", "worth", "well", "advanced", "optimal",
    ],
    "advice": [
        "tip", "tips", "advice", "help", "guide", "recommend",
        "recommendations", "suggestion", "suggestions", "suggest", "hint",
        "strategy", "strategies", "plan", "idea", "options",
    ],
    "trade": [
        "buy", "sell", "trade", "trades", "trading", "price", "prices",
        "cost", "value", "worth", "market", "deal", "offer", "bargain", "rate",
        "seller", "scam", "fair", "accept", "trends", "ripped",
    ],
    "job": [
        "job", "jobs", "work", "working", "employment", "career",
        "legitimate", "legal", "honest", "salary", "wage", "shift",
        "flexible", "part",
    ],
    "adventure": [
        "adventure", "story", "mission", "quest", "journey", "explore",
        "narrative", "exciting", "fun", "challenge", "interactive", "play",
        "something",
    ],
    "opportunity": [
        "opportunity", "opportunities", "chance", "offer", "offers", "deal",
        "available", "open", "pending", "waiting", "message", "messages",
        "contact", "looking", "anyone",
    ],
    "intel": [
        "intel", "information", "info", "secret", "hidden", "rumor", "rumors",
        "news", "knowledge", "data", "insight", "insider", "know",
        "happening", "saying", "threat", "assessment",
    ],
    "property": [
        "property", "properties", "invest", "investment", "investing",
        "estate", "real", "rental", "passive", "safehouse", "home",
        "business", "income",
    ],
    "greeting": [
        "hello", "hi", "hey", "yo", "sup", "greetings", "howdy", "morning",
        "evening",
    ],
    "gratitude": [
        "thanks", "thank", "appreciate", "helpful", "awesome", "perfect",
        "great",
    ],
    "identity": [
        "you", "yourself", "sarah", "ai", "assistant", "bot", "are",
    ],
    "guidance": [
        "tutorial", "guide", "confused", "lost", "explain", "beginner",
        "beginners", "commands", "command", "works", "around", "game",
    ],
    "strategy": [
        "strategy", "strategies", "succeed", "win", "winning", "optimal",
        "efficiency", "efficient", "long", "term", "path", "min", "max",
        "progress",
    ],
}

# Words not listed here weigh 1.0
WORD_IMPORTANCE: dict[str, float] = {
    # Intent-specific
    "crime": 2.0,
    "crimes": 2.0,
    "steal": 2.0,
    "heist": 2.0,
    "robbery": 2.0,
    "burglary": 2.0,
    "rob": 2.0,
    "money": 1.8,
    "earn": 1.8,
    "rich": 1.8,
    "broke": 1.8,
    "heat": 2.0,
    "wanted": 2.0,
    "police": 1.8,
    "arrest": 1.8,
    "jail": 2.0,
    "prison": 2.0,
    "bail": 2.0,
    "lawyer": 1.8,
    "sentence": 1.8,
    "status": 1.8,
    "stats": 1.8,
    "health": 1.7,
    "energy": 1.7,
    "level": 1.5,
    "job": 1.8,
    "jobs": 1.8,
    "work": 1.5,
    "legal": 1.8,
    "legitimate": 1.8,
    "gear": 1.8,
    "equipment": 1.8,
    "weapon": 1.8,
    "tool": 1.7,
    "tools": 1.7,
    "crew": 1.8,
    "ally": 1.8,
    "trust": 1.7,
    "relationship": 1.8,
    "relationships": 1.8,
    "buy": 1.6,
    "sell": 1.6,
    "trade": 1.7,
    "market": 1.2,
    "scam": 2.0,
    "district": 1.7,
    "area": 1.5,
    "location": 1.6,
    "downtown": 1.8,
    "neighborhood": 1.7,
    "intel": 2.0,
    "secret": 1.8,
    "rumor": 1.8,
    "rumors": 1.8,
    "news": 1.8,
    "adventure": 2.0,
    "story": 1.8,
    "mission": 1.8,
    "quest": 1.8,
    "opportunity": 1.9,
    "opportunities": 1.9,
    "offer": 1.7,
    "offers": 1.7,
    "available": 1.5,
    "property": 2.0,
    "invest": 2.0,
    "help": 1.5,
    "tutorial": 1.8,
    "guide": 1.6,
    "confused": 1.8,
    "tips": 1.6,
    "advice": 1.6,
    "recommend": 1.6,
    "strategy": 1.7,
    "thanks": 2.0,
    "thank": 2.0,
    "hello": 2.0,
    "hey": 2.0,
    "yourself": 1.8,
    "sarah": 1.8,
    # Moderately informative
    "best": 1.3,
    "good": 1.2,
    "fast": 1.3,
    "easy": 1.3,
    "safe": 1.4,
    "risky": 1.4,
    "dangerous": 1.4,
    "time": 1.3,
    "now": 1.2,
    "next": 1.3,
    # Common words
    "what": 1.0,
    "how": 1.0,
    "where": 1.0,
    "when": 1.0,
    "why": 1.0,
    "should": 1.0,
    "could": 1.0,
    "would": 1.0,
    "can": 1.0,
    "will": 1.0,
    "do": 0.8,
    "make": 0.9,
    "get": 0.9,
    "give": 0.9,
    "take": 0.9,
    "me": 0.5,
    "my": 0.5,
    "you": 0.5,
    "your": 0.5,
    "an": 0.3,
    "the": 0.3,
    "is": 0.3,
    "are": 0.3,
    "to": 0.3,
    "for": 0.3,
    "of": 0.3,
    "in": 0.3,
    "on": 0.3,
}
