"""Hand-authored trigger rules and entity vocabularies for the pattern matcher.

Rules are matched against normalized, typo-corrected text, so they are
written in canonical form ("what is", "police", "i am") rather than the raw
slang a player types. Each matching rule adds a fixed bonus to its intent.
"""

TRIGGER_RULES: dict[str, list[str]] = {
    "money_advice": [
        r"\b(make|earn|get|stack|need|making|earning) (more |some |fast |the )?money\b",
        r"\bhow (do i|can i|to) (make|earn)\b",
        r"\bmoney (tips|advice|fast)\b",
        r"\b(best|fastest|quickest) way to (earn|make|get)\b",
        r"\b(get|become|be) rich\b",
        r"\bi am (broke|poor|desperate)\b",
        r"\b(no|low on|out of) money\b",
        r"\bneed to earn\b",
        r"\bcannot afford\b",
        r"\bmore profitable\b",
        r"\bmakes? more money\b",
        r"\b(best|highest) (paying|earning)\b",
        r"\bfor money\b",
    ],
    "crime_advice": [
        r"\bwhat crimes?\b",
        r"\b(which|best|good|easy|safe|safest|low risk|high reward|advanced|harder) crimes?\b",
        r"\bcrimes? (recommendations|tips|advice|options|ideas|for|with)\b",
        r"\b(suggest|recommend) (a |an |some )?crimes?\b",
        r"\b(can|should) i (steal|rob|commit)\b",
        r"\bhelp me with crimes?\b",
        r"\bis (robbery|burglary|stealing|a heist) worth\b",
        r"\b(pull off|do|plan) an? (heist|robbery|burglary)\b",
        r"\b(burglary|robbery|heist) targets\b",
    ],
    "stat_analysis": [
        r"\b(show|check|see|view) my (stats|status|money|health|energy|level|reputation|progress)\b",
        r"\bcheck my\b",
        r"\bwhat (are|is) my (stats|status|health|energy|level|reputation)\b",
        r"\b(how am i doing|am i doing well|how far have i come|where do i stand|is my progress good)\b",
        r"\b(am i doing|have i come|do i stand|my progress)\b",
        r"\banalyze my (situation|stats|status)\b",
        r"\brundown\b",
        r"\bcurrent (status|stats)\b",
        r"\bstatus report\b",
        r"\bhow much (energy|health|experience|money) do i have\b",
        r"\bwhat level am i\b",
        r"\bmy reputation\b",
    ],
    "heat_advice": [
        r"\bhow (wanted|much heat)\b",
        r"\b(heat|wanted) level\b",
        r"\b(check|what is) my (heat|wanted)\b",
        r"\bam i (wanted|being watched)\b",
        r"\bpolice (are )?(after|onto|watching) me\b",
        r"\bheat check\b",
        r"\b(reduce|lower|lose|drop|shake) (my |the )?(heat|wanted)\b",
        r"\btoo (wanted|much heat)\b",
        r"\bcool (down|off)\b",
        r"\bhow to (cool|hide|avoid)\b",
        r"\blay low\b",
        r"\bavoid(ing)? (the )?police\b",
        r"\b(escape|avoid|beat) the heat\b",
        r"\b(get|getting|be) caught\b",
        r"\bheat too high\b",
    ],
    "time_management": [
        r"\bwhat (should i do|to do) (now|next)\b",
        r"\buse of (my )?time\b",
        r"\bspend my time\b",
        r"\bprioriti[sz]e\b",
        r"\bpriorit(y|ies)\b",
        r"\bmost important\b",
        r"\brunning out of energy\b",
        r"\bout of (energy|time)\b",
        r"\btime is running out\b",
        r"\bshould i (rest|sleep|wait)\b",
        r"\bwhile (i am )?waiting\b",
        r"\bbest thing to do\b",
        r"\boptimi[sz]e my time\b",
        r"\bnext move\b",
        r"\bwhat comes next\b",
        r"\broutine\b",
    ],
    "job_advice": [
        r"\bwhat jobs\b",
        r"\b(get|find|need) a job\b",
        r"\b(legitimate|legal|honest) (work|jobs?|ways)\b",
        r"\bany (work|jobs?)\b",
        r"\bjob opportunit(y|ies)\b",
        r"\b(find|looking for) (work|a job|jobs)\b",
        r"\bcrimes? versus (jobs?|work)\b",
        r"\bis (working|a job) worth\b",
        r"\bjobs? that pay\b",
        r"\bbest (legal )?jobs?\b",
        r"\bpart time\b",
        r"\b(fast|easy|quick) (jobs?|work)\b",
        r"\bflexible (work|jobs?)\b",
    ],
    "market_analysis": [
        r"\bcurrent prices?\b",
        r"\bprice (check|changes)\b",
        r"\bhow much is (this|it|that) worth\b",
        r"\bthe market\b",
        r"\bmarket (trends|like|report)\b",
        r"\bgoing rate\b",
        r"\bcheck (item|the) (value|price)\b",
        r"\b(things|stuff|what) to (sell|buy)\b",
        r"\btrading (advice|tips)\b",
        r"\bprofitable trades?\b",
        r"\bseller prices?\b",
        r"\bsell my\b",
        r"\btime to (sell|buy)\b",
        r"\bworth holding\b",
    ],
    "equipment_advice": [
        r"\bwhat (gear|equipment|lockpicks|weapons?|tools)\b",
        r"\b(gear|equipment|item|weapon|disguise) (recommendations|suggestions|options|advice)\b",
        r"\b(best|better) (tools|gear|weapons?|equipment)\b",
        r"\bupgrade\b",
        r"\b(tools|gear|equipment) for\b",
        r"\b(gear|equipment|weapon|item) (good|enough|worth)\b",
    ],
    "location_tips": [
        r"\b(tell me about|describe|info on) (the )?(downtown|parkdale|scarborough|yorkville|kensington|this district|this area|this neighborhood)\b",
        r"\b(what|which|best|safest) (area|district|neighborhood|zone)\b",
        r"\b(location|district|area|neighborhood|territory) (info|information|guide)\b",
        r"\bwhere should i go\b",
        r"\bwhere (can|should) i (go|travel|head)\b",
        r"\bget to (downtown|parkdale|scarborough|yorkville|kensington)\b",
        r"\btravel\b",
        r"\bhow far is\b",
    ],
    "crew_management": [
        r"\b(get|build|start|hire|join|find|grow) (a |my )?crew\b",
        r"\bcrew (management|benefits|loyalty|members)\b",
        r"\bteam (advice|up)\b",
        r"\bworking with others\b",
        r"\bpartner up\b",
        r"\brecruit\b",
        r"\bsplit (the )?(earnings|money|profits?)\b",
        r"\bwith (my |the )?crew\b",
    ],
    "ai_intel": [
        r"\bintel\b",
        r"\bwhat do you know\b",
        r"\buseful (info|information)\b",
        r"\bsecret\b",
        r"\binsider\b",
        r"\bhidden (knowledge|info|information)\b",
        r"\bhappening (in|around)\b",
        r"\b(any|the) news\b",
        r"\brumou?rs?\b",
        r"\bthreat assessment\b",
        r"\bpeople saying\b",
    ],
    "greeting": [
        r"^(hello|hi|hey|yo|sup|howdy|greetings)\b",
        r"^good (morning|evening|afternoon)\b",
    ],
    "thanks": [
        r"\b(thanks|thank you|appreciate)\b",
        r"\b(that is|very|so) helpful\b",
        r"^(perfect|awesome|great|nice)\b",
    ],
    "who_are_you": [
        r"\b(who|what) are you\b",
        r"\babout yourself\b",
        r"\bwhat is sarah\b",
        r"\bwhat can you do\b",
        r"\bare you an? (ai|bot|robot|assistant|human)\b",
        r"\bhow do you work\b",
    ],
    "help": [
        r"^(help|help me|i need help|need help)$",
        r"\bhow does this work\b",
        r"\b(this|the game) works?\b",
        r"\bexplain\b",
        r"\btutorial\b",
        r"\bguide me\b",
        r"\bi am (lost|confused|new|stuck)\b",
        r"^what (do i do|now)\b",
        r"\bwhat do i do$",
        r"\bshow me around\b",
        r"\bbeginners? (tips|guide|help)\b",
        r"\bnew player\b",
        r"\bcommands?\b",
    ],
    "strategy_advice": [
        r"\bhow to (succeed|progress|win|level up)\b",
        r"\b(best|long term|advanced|winning) (strateg(y|ies)|plan)\b",
        r"\btips for (winning|success)\b",
        r"\boptimal\b",
        r"\blevel up\b",
        r"\befficien(cy|t)\b",
        r"\bmin ?max\b",
    ],
    "opportunity_inquiry": [
        r"\b(any|new|show me|what) opportunit(y|ies)\b",
        r"\bwhat is available\b",
        r"\bpending\b",
        r"\b(any|new) (offers|messages)\b",
        r"\bmessages? for me\b",
        r"\banyone looking for me\b",
    ],
    "adventure_interest": [
        r"\badventure\b",
        r"\bstory\b",
        r"\bmission\b",
        r"\bsomething (exciting|fun|different)\b",
    ],
    "relationship_inquiry": [
        r"\bwho (can|should) i (trust|work with)\b",
        r"\brelationships?\b",
        r"\bwho (likes|hates|trusts) me\b",
        r"\btrust levels?\b",
        r"\bmy connections\b",
        r"\b(allies|enemies)\b",
        r"\bwork with\b",
    ],
    "jail_strategy": [
        r"\b(get|break) out of (jail|prison)\b",
        r"\b(got|been|get|was) arrested\b",
        r"\bbail\b",
        r"\bescape (from )?(jail|prison)\b",
        r"\bsentence\b",
        r"\bin (jail|prison)\b",
        r"\blawyer\b",
    ],
    "investment": [
        r"\b(buy|own|invest in) (a |some )?(property|properties|safehouse|business|real estate)\b",
        r"\binvest(ing|ment)?\b",
        r"\breal estate\b",
        r"\bpassive income\b",
        r"\bpropert(y|ies)\b",
        r"\brental\b",
    ],
    "trade_analysis": [
        r"\bscam\b",
        r"\bis this (trade|deal|offer)\b",
        r"\b(offer|deal|trade) (legitimate|fair|real)\b",
        r"\baccept (this|the|that) (deal|offer|trade)\b",
        r"\bfair (trade|deal|offer)\b",
        r"\bripped off\b",
    ],
}

# Phrases that introduce a character name ("tell me about marcus")
NAME_PATTERNS: list[str] = [
    r"(?:tell me about|about|who is|info on|trust)\s+(\w+)",
    r"(\w+)(?:'s| is| has)\b",
]

# Never treated as a name
COMMON_WORDS: list[str] = [
    "the", "a", "an", "my", "your", "this", "that", "what", "how", "who",
    "is", "are", "it", "there", "here", "me", "you", "yourself", "i", "he",
    "she", "they", "we", "which", "where", "when", "why", "someone",
]

CRIME_TYPES: list[str] = [
    "pickpocket", "shoplifting", "mugging", "car theft", "burglary",
    "robbery", "heist",
]

JOB_TYPES: list[str] = [
    "dishwasher", "delivery", "security", "bartender", "mechanic",
]

DISTRICTS: list[str] = [
    "downtown", "parkdale", "scarborough", "yorkville", "kensington",
]
