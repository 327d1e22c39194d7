"""Intent catalog: display names, descriptions, exemplar phrases and keyword weights.

Exemplars are written the way players actually type (slang, missing
apostrophes) and go through the same normalization and typo correction as
live input. Keywords are canonical, post-normalization words; their weights
feed the pattern matcher's keyword scoring.
"""

INTENT_EXEMPLARS: dict[str, dict] = {
    # Money and earning
    "money_advice": {
        "friendly_name": "Money Tips",
        "description": "Tips for making money",
        "exemplars": [
            "how do i make money",
            "how can i earn cash",
            "whats the best way to get money",
            "i need money fast",
            "help me earn money",
            "give me money tips",
            "how to make more cash",
            "tell me how to get rich",
            "whats the fastest way to earn",
            "how do i earn more",
            "need money right now",
            "need money quick",
            "how to stack money",
            "best way to get money",
            "making money advice",
            "what should i do for money",
            "how to become rich",
            "im broke what do i do",
            "i have no money",
            "low on cash help",
            "need to earn fast",
            "running out of money",
            "cant afford anything",
            "whats more profitable",
            "which makes more money",
            "best paying activity",
            "highest earning option",
        ],
        "keywords": {
            "money": 2,
            "earn": 2,
            "earning": 2,
            "rich": 1.5,
            "broke": 2,
            "poor": 1.5,
            "profit": 1.5,
            "profitable": 1.5,
            "income": 1,
            "paying": 1.5,
            "afford": 1.5,
            "wealthy": 1.5,
            "desperate": 1,
        },
    },
    # Crime
    "crime_advice": {
        "friendly_name": "Crime Tips",
        "description": "Get crime recommendations",
        "exemplars": [
            "what crime should i do",
            "which crime is best",
            "help me with crimes",
            "crime recommendations",
            "what crime to commit",
            "best crime for my level",
            "suggest a crime",
            "what can i steal",
            "crime tips please",
            "what crime matches my skills",
            "crimes for beginners",
            "easy crimes to start",
            "harder crimes available",
            "advanced crime options",
            "low risk crimes",
            "safe crimes to do",
            "high reward crimes",
            "is robbery worth the risk",
            "crimes with good payout",
            "should i rob someone",
            "pull off a heist",
            "good burglary targets",
        ],
        "keywords": {
            "crime": 2,
            "crimes": 2,
            "steal": 2,
            "rob": 2,
            "robbery": 2,
            "heist": 2,
            "burglary": 2,
            "theft": 2,
            "criminal": 1.5,
            "commit": 1.5,
            "pickpocket": 2,
            "mugging": 2,
            "shoplifting": 2,
        },
    },
    # Stats and status
    "stat_analysis": {
        "friendly_name": "Status Check",
        "description": "Analyze your current stats",
        "exemplars": [
            "show my stats",
            "check my status",
            "what are my stats",
            "how am i doing",
            "analyze my situation",
            "give me a rundown",
            "my current status",
            "status report",
            "what is my health",
            "how much energy do i have",
            "check my money",
            "what level am i",
            "how much experience do i have",
            "my reputation level",
            "how far have i come",
            "am i doing well",
            "is my progress good",
            "where do i stand",
        ],
        "keywords": {
            "stats": 2.5,
            "status": 2.5,
            "health": 2,
            "energy": 2,
            "level": 1.5,
            "experience": 1.5,
            "reputation": 1.5,
            "rundown": 2,
            "situation": 1.5,
            "report": 1,
        },
    },
    # Heat and police attention
    "heat_advice": {
        "friendly_name": "Heat Check",
        "description": "How to reduce heat and avoid cops",
        "exemplars": [
            "how hot am i",
            "what is my heat level",
            "am i wanted",
            "check my wanted level",
            "are cops after me",
            "heat check",
            "how much heat",
            "how to reduce heat",
            "how to lower my wanted level",
            "getting too hot",
            "cops are onto me",
            "how to cool down",
            "lay low advice",
            "avoiding police tips",
            "escape the heat",
            "will i get caught",
            "should i lay low",
            "am i being watched",
            "heat too high",
        ],
        "keywords": {
            "heat": 2.5,
            "wanted": 2,
            "police": 2,
            "arrest": 1.5,
            "caught": 1.5,
            "cool": 1,
            "watched": 1.5,
            "hiding": 1.5,
            "undetected": 1.5,
            "lay": 1.5,
        },
    },
    # Time management
    "time_management": {
        "friendly_name": "Time Advice",
        "description": "Priority and next action advice",
        "exemplars": [
            "what should i do now",
            "whats the best use of time",
            "what to do next",
            "how to spend my time",
            "prioritize my actions",
            "whats most important",
            "running out of energy",
            "should i rest",
            "should i sleep",
            "what to do while waiting",
            "best thing to do right now",
            "optimize my time",
            "time is running out",
            "plan my next move",
            "what comes next",
            "priority list",
            "daily routine advice",
        ],
        "keywords": {
            "time": 2,
            "next": 2,
            "now": 1.5,
            "priority": 2,
            "prioritize": 2,
            "rest": 1.5,
            "sleep": 1.5,
            "routine": 1.5,
            "important": 1.5,
            "waiting": 1.5,
        },
    },
    # Legitimate work
    "job_advice": {
        "friendly_name": "Job Tips",
        "description": "Get job recommendations",
        "exemplars": [
            "what jobs are available",
            "how do i get a job",
            "legit work options",
            "legal ways to earn",
            "any work around",
            "job opportunities",
            "where to find work",
            "crime vs jobs",
            "is working worth it",
            "should i get a job",
            "jobs that pay well",
            "best legal job",
            "part time work",
            "quick jobs",
            "flexible work",
        ],
        "keywords": {
            "job": 2.5,
            "jobs": 2.5,
            "work": 1.5,
            "working": 1.5,
            "legal": 2,
            "legitimate": 2,
            "honest": 1.5,
            "career": 2,
            "employment": 2,
            "shift": 1,
        },
    },
    # Market and trading
    "market_analysis": {
        "friendly_name": "Market Info",
        "description": "Trading market analysis",
        "exemplars": [
            "what are current prices",
            "price check",
            "how much is this worth",
            "whats the market like",
            "going rate for items",
            "check item value",
            "best things to sell",
            "what to buy",
            "trading advice",
            "profitable trades",
            "fence prices",
            "sell my stuff",
            "market trends",
            "price changes",
            "good time to sell",
            "worth holding onto",
        ],
        "keywords": {
            "market": 2,
            "price": 2,
            "prices": 1.5,
            "sell": 1.5,
            "buy": 1.5,
            "trading": 1.5,
            "trades": 1.5,
            "value": 1.5,
            "worth": 1.5,
            "cost": 1,
            "seller": 1.5,
            "trends": 1.5,
            "rate": 1.5,
        },
    },
    # Gear and items
    "equipment_advice": {
        "friendly_name": "Equipment Tips",
        "description": "Weapon and gear recommendations",
        "exemplars": [
            "what gear do i need",
            "equipment recommendations",
            "best tools for the job",
            "upgrade my gear",
            "item suggestions",
            "what lockpicks to buy",
            "best weapon",
            "disguise options",
            "tools for burglary",
            "equipment for heists",
            "is this item worth it",
            "should i upgrade",
            "better equipment available",
            "is my current gear good enough",
        ],
        "keywords": {
            "gear": 2.5,
            "equipment": 2.5,
            "tool": 2,
            "tools": 2,
            "item": 1.5,
            "items": 1.5,
            "weapon": 2,
            "weapons": 2,
            "upgrade": 2,
            "lockpick": 2,
            "lockpicks": 2,
            "disguise": 2,
            "armor": 2,
        },
    },
    # Districts and territory
    "location_tips": {
        "friendly_name": "Location Info",
        "description": "District-specific tips and info",
        "exemplars": [
            "tell me about downtown",
            "what area is best",
            "describe this district",
            "location information",
            "neighborhood guide",
            "territory info",
            "where should i go",
            "best area for crimes",
            "safest neighborhood",
            "which district",
            "how do i get to parkdale",
            "travel options",
            "how far is yorkville",
        ],
        "keywords": {
            "area": 2,
            "district": 2,
            "districts": 2,
            "location": 2,
            "neighborhood": 2,
            "territory": 1.5,
            "zone": 1.5,
            "downtown": 2,
            "parkdale": 2,
            "scarborough": 2,
            "yorkville": 2,
            "kensington": 2,
            "travel": 1.5,
        },
    },
    # Crew
    "crew_management": {
        "friendly_name": "Crew Info",
        "description": "Crew hiring and management advice",
        "exemplars": [
            "how do i get a crew",
            "crew management",
            "team advice",
            "working with others",
            "partner up",
            "recruit members",
            "crew benefits",
            "split earnings",
            "trust issues with crew",
            "crew loyalty",
            "build my crew",
            "hire a crew",
        ],
        "keywords": {
            "crew": 2.5,
            "team": 2,
            "partner": 1.5,
            "recruit": 2,
            "members": 1.5,
            "member": 1.5,
            "hire": 2,
            "loyalty": 1.5,
            "split": 1.5,
            "others": 1.5,
        },
    },
    # Intel and rumors
    "ai_intel": {
        "friendly_name": "AI Intel",
        "description": "Info about other players",
        "exemplars": [
            "give me intel",
            "what do you know",
            "any useful information",
            "secret tips",
            "insider info",
            "hidden knowledge",
            "whats happening in the city",
            "any news",
            "word on the street",
            "rumors",
            "threat assessment",
            "what are people saying",
        ],
        "keywords": {
            "intel": 2.5,
            "information": 1.5,
            "info": 1.5,
            "secret": 2,
            "hidden": 1.5,
            "rumors": 2,
            "rumor": 2,
            "news": 2,
            "knowledge": 1.5,
            "insider": 2,
            "threat": 1.5,
            "know": 1.5,
            "happening": 1.5,
            "saying": 1.5,
        },
    },
    # Social niceties
    "greeting": {
        "friendly_name": "Greeting",
        "description": "Say hello",
        "exemplars": [
            "hello",
            "hi sarah",
            "hey",
            "whats up",
            "yo",
            "sup",
            "greetings",
            "good morning",
            "good evening",
            "howdy",
        ],
        "keywords": {
            "hello": 2.5,
            "hi": 2.5,
            "hey": 2.5,
            "yo": 2.5,
            "sup": 2.5,
            "greetings": 2.5,
            "howdy": 2.5,
            "morning": 1.5,
            "evening": 1.5,
        },
    },
    "thanks": {
        "friendly_name": "Thanks",
        "description": "Thank the assistant",
        "exemplars": [
            "thanks",
            "thank you",
            "appreciate it",
            "thats helpful",
            "awesome thanks",
            "perfect",
            "great help",
        ],
        "keywords": {
            "thanks": 2.5,
            "thank": 2.5,
            "appreciate": 2.5,
            "helpful": 1.5,
            "awesome": 1,
            "perfect": 1.5,
            "great": 1.5,
        },
    },
    "who_are_you": {
        "friendly_name": "Identity Question",
        "description": "Learn about the assistant",
        "exemplars": [
            "who are you",
            "what are you",
            "whats sarah",
            "tell me about yourself",
            "what can you do",
            "are you an ai",
            "how do you work",
        ],
        "keywords": {
            "yourself": 2,
            "sarah": 2,
            "ai": 1.5,
            "assistant": 2,
            "bot": 1.5,
            "you": 1.5,
        },
    },
    # Help and onboarding
    "help": {
        "friendly_name": "Help Request",
        "description": "See what the assistant can do",
        "exemplars": [
            "help",
            "i need help",
            "how does this work",
            "explain the game",
            "tutorial",
            "guide me",
            "im lost",
            "what do i do",
            "im confused",
            "show me around",
            "beginner tips",
            "new player help",
            "commands list",
            "what commands are there",
        ],
        "keywords": {
            "help": 2,
            "tutorial": 2.5,
            "guide": 1.5,
            "confused": 2.5,
            "lost": 2,
            "explain": 1.5,
            "beginner": 1.5,
            "commands": 2.5,
            "command": 2.5,
            "around": 1.5,
        },
    },
    # Long-term planning
    "strategy_advice": {
        "friendly_name": "Strategy Tips",
        "description": "Optimal progression paths",
        "exemplars": [
            "how to succeed",
            "best strategy",
            "long term plan",
            "how to progress",
            "tips for winning",
            "optimal path",
            "how to level up fast",
            "efficiency tips",
            "min max advice",
            "advanced strategies",
        ],
        "keywords": {
            "strategy": 2.5,
            "strategies": 2.5,
            "plan": 1.5,
            "succeed": 2,
            "win": 2,
            "winning": 2,
            "optimal": 2,
            "efficiency": 2,
            "efficient": 2,
            "progress": 1.5,
            "min": 1.5,
            "max": 1.5,
        },
    },
    # Offers and messages
    "opportunity_inquiry": {
        "friendly_name": "Opportunities",
        "description": "Check pending offers and messages",
        "exemplars": [
            "any opportunities",
            "whats available",
            "show me opportunities",
            "pending offers",
            "any offers waiting",
            "messages for me",
            "anyone looking for me",
            "new opportunities",
        ],
        "keywords": {
            "opportunity": 2.5,
            "opportunities": 2.5,
            "offers": 2,
            "available": 1.5,
            "pending": 2,
            "message": 2,
            "messages": 2,
            "waiting": 1,
            "looking": 1.5,
        },
    },
    # Story content
    "adventure_interest": {
        "friendly_name": "Adventure",
        "description": "Start an interactive story",
        "exemplars": [
            "start an adventure",
            "i want a story",
            "give me a mission",
            "something exciting",
            "lets do something fun",
            "adventure time",
            "interactive story",
            "text adventure",
            "play a story",
        ],
        "keywords": {
            "adventure": 2.5,
            "story": 2.5,
            "mission": 2,
            "exciting": 2,
            "fun": 1.5,
            "quest": 2,
            "narrative": 2,
        },
    },
    # Relationships with other characters
    "relationship_inquiry": {
        "friendly_name": "Relationships",
        "description": "Player trust and relationship advice",
        "exemplars": [
            "who can i trust",
            "relationship status",
            "npc relationships",
            "who likes me",
            "trust levels",
            "my connections",
            "allies and enemies",
            "who should i work with",
        ],
        "keywords": {
            "trust": 2,
            "relationship": 2.5,
            "relationships": 2.5,
            "ally": 2,
            "allies": 2,
            "enemy": 2,
            "enemies": 2,
            "connections": 1.5,
            "likes": 1.5,
        },
    },
    # Arrest and jail
    "jail_strategy": {
        "friendly_name": "Jail Help",
        "description": "Jail escape and bail advice",
        "exemplars": [
            "how do i get out of jail",
            "i got busted",
            "bail money",
            "escape from prison",
            "how long is my sentence",
            "im in jail what now",
            "get a lawyer",
            "help me get out of prison",
        ],
        "keywords": {
            "jail": 2.5,
            "prison": 2.5,
            "bail": 2.5,
            "sentence": 2,
            "lawyer": 2,
            "parole": 2.5,
            "arrested": 1.5,
        },
    },
    # Property
    "investment": {
        "friendly_name": "Investments",
        "description": "Property investment advice",
        "exemplars": [
            "should i buy property",
            "best properties to invest in",
            "real estate advice",
            "how do i invest my money",
            "passive income",
            "buy a safehouse",
            "is property worth it",
            "rental income",
        ],
        "keywords": {
            "property": 2.5,
            "properties": 2.5,
            "invest": 2.5,
            "investment": 2.5,
            "investing": 2.5,
            "estate": 2,
            "rental": 2,
            "passive": 2,
            "safehouse": 2,
        },
    },
    # Trade offers between players
    "trade_analysis": {
        "friendly_name": "Trade Check",
        "description": "Trade offer scam detection",
        "exemplars": [
            "is this trade a scam",
            "is this offer legit",
            "should i accept this deal",
            "fair trade",
            "trade offer analysis",
            "am i getting ripped off",
            "is this deal fair",
        ],
        "keywords": {
            "scam": 2.5,
            "deal": 2,
            "accept": 1.5,
            "fair": 1.5,
            "ripped": 2,
            "offer": 1.5,
        },
    },
    # Fallback
    "unknown": {
        "friendly_name": "Unknown",
        "description": "Unrecognized request",
        "exemplars": [],
        "keywords": {},
    },
}
