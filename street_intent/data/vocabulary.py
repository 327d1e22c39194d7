"""Typo-correction vocabulary and keyboard/phonetic similarity tables.

Order matters: when two vocabulary words are equally close to a misspelling
the one listed first wins, so the domain's core nouns lead the list.
"""

DOMAIN_VOCABULARY: list[str] = [
    # Core game concepts
    "money", "crime", "crimes", "criminal", "steal", "stealing", "theft",
    "heist", "robbery", "burglary", "pickpocket", "pickpocketing",
    "shoplift", "shoplifting", "carjack", "mugging", "scheme", "scam",
    "fraud", "fencing",
    # Questions
    "what", "where", "when", "why", "how", "which", "who", "should", "could",
    "would", "can", "will", "does", "is", "are", "have", "has",
    # Stats and status
    "status", "stats", "health", "energy", "heat", "wanted", "tail", "chase",
    "following", "level",
    "experience", "reputation", "skills", "ability", "abilities", "skill",
    # Police and law
    "police", "arrest", "arrested", "jail", "prison", "sentence", "warrant",
    "investigation", "evidence", "witness", "attorney", "lawyer", "bail",
    "parole",
    # Locations
    "downtown", "uptown", "suburbs", "industrial", "waterfront", "parkdale",
    "scarborough", "yorkville", "kensington", "district", "neighborhood",
    "territory", "location", "area", "zone",
    # Characters
    "sarah", "fixer", "dealer", "contact", "connection", "crew", "member",
    "boss", "associate", "partner", "rival", "enemy", "ally",
    # Items and equipment
    "lockpick", "lockpicks", "weapon", "weapons", "tool", "tools", "gear",
    "equipment", "item", "items", "inventory", "disguise", "mask",
    # Actions and commands
    "help", "travel", "go", "move", "buy", "sell", "use", "equip", "attack",
    "flee", "run", "hide", "wait", "rest", "sleep", "work", "commit",
    "plan", "execute", "escape", "evade", "bribe",
    # Time
    "morning", "afternoon", "evening", "night", "dawn", "dusk", "midnight",
    "hour", "hours", "minute", "minutes", "day", "days", "week", "weeks",
    # Money terms
    "dollars", "grand", "thousand", "million", "broke", "rich", "wealthy",
    "profit", "loss", "cost", "price", "value", "worth", "income", "expense",
    # Advice and info
    "tips", "advice", "guide", "tutorial", "explain", "information", "info",
    "details", "strategy", "strategies", "recommend",
    # Common verbs
    "need", "want", "like", "know", "think", "make", "get", "give", "take",
    "find", "show", "tell", "start", "stop", "try", "do", "earn", "spend",
    # Modifiers
    "fast", "slow", "easy", "hard", "difficult", "simple", "complex", "safe",
    "dangerous", "risky", "best", "worst", "good", "bad", "more", "less",
    # Game specific
    "minigame", "mission", "quest", "objective", "goal", "target", "reward",
    "cooldown", "timer", "unlock", "upgrade", "progress", "achievement",
    # Assistant specific
    "assistant", "analyze", "analysis", "suggestion", "opportunity",
    "opportunities", "alert", "warning", "critical",
    # Function words
    "a", "i", "me", "my", "mine", "you", "your", "we", "us", "our", "they",
    "them", "their", "he", "him", "his", "she", "her", "it", "this", "that",
    "these", "those", "the", "an", "and", "or", "but", "if", "so", "not",
    "no", "yes", "to", "of", "in", "on", "at", "by", "for", "from", "with",
    "about", "into", "onto", "off", "out", "up", "down", "over", "there",
    "here", "am", "be", "been", "being", "was", "were", "did", "done",
    "had", "any", "all", "some", "much", "many", "very", "too", "just",
    "now", "then", "than", "also", "again", "still", "right", "okay", "ok",
]

# Neighbouring keys on a QWERTY layout
KEYBOARD_ADJACENT: dict[str, list[str]] = {
    "q": ["w", "a"],
    "w": ["q", "e", "s", "a"],
    "e": ["w", "r", "d", "s"],
    "r": ["e", "t", "f", "d"],
    "t": ["r", "y", "g", "f"],
    "y": ["t", "u", "h", "g"],
    "u": ["y", "i", "j", "h"],
    "i": ["u", "o", "k", "j"],
    "o": ["i", "p", "l", "k"],
    "p": ["o", "l"],
    "a": ["q", "w", "s", "z"],
    "s": ["w", "e", "a", "d", "z", "x"],
    "d": ["e", "r", "s", "f", "x", "c"],
    "f": ["r", "t", "d", "g", "c", "v"],
    "g": ["t", "y", "f", "h", "v", "b"],
    "h": ["y", "u", "g", "j", "b", "n"],
    "j": ["u", "i", "h", "k", "n", "m"],
    "k": ["i", "o", "j", "l", "m"],
    "l": ["o", "p", "k"],
    "z": ["a", "s", "x"],
    "x": ["z", "s", "d", "c"],
    "c": ["x", "d", "f", "v"],
    "v": ["c", "f", "g", "b"],
    "b": ["v", "g", "h", "n"],
    "n": ["b", "h", "j", "m"],
    "m": ["n", "j", "k"],
}

# Letters that are commonly swapped for one another by sound
PHONETIC_GROUPS: list[list[str]] = [
    ["c", "k"],
    ["f", "v"],
    ["g", "j"],
    ["s", "c", "z"],
    ["i", "y"],
    ["a", "e"],
    ["o", "u"],
    ["n", "m"],
    ["b", "p"],
    ["d", "t"],
    ["v", "w"],
]
