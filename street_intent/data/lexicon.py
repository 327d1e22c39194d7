"""Street slang, abbreviation, contraction and idiom tables.

Every table maps a lowercase surface form to its canonical rewrite. The
rewrites themselves must never loop back to a key (directly or through a
chain), otherwise normalization cannot settle on a fixed point.

Multi-word entries belong in IDIOM_MAP; the per-token tables are only
consulted one whitespace-delimited token at a time.
"""

# Single-token street slang -> canonical word(s)
SLANG_MAP: dict[str, str] = {
    # Money
    "paper": "money",
    "bread": "money",
    "dough": "money",
    "cheddar": "money",
    "guap": "money",
    "gwop": "money",
    "stacks": "money",
    "bands": "money",
    "racks": "money",
    "benjamins": "money",
    "bucks": "money",
    "cash": "money",
    "loot": "money",
    "moolah": "money",
    "cheese": "money",
    "scrilla": "money",
    "cake": "money",
    "bag": "money",
    "bankroll": "money",
    # Crime
    "lick": "crime",
    "score": "crime",
    "hustle": "crime",
    "gig": "job",
    "plug": "connection",
    "fence": "seller",
    "boost": "steal",
    "jack": "steal",
    # Police and heat
    "hot": "wanted",
    "five-o": "police",
    "feds": "police",
    "cops": "police",
    "pigs": "police",
    "po-po": "police",
    "law": "police",
    "badge": "police",
    "narcs": "police",
    # Condition
    "strapped": "poor",
    "busted": "arrested",
    "loaded": "rich",
    "ballin": "rich",
    "flush": "rich",
    "stacked": "rich",
    "starving": "desperate",
    "hurting": "desperate",
    # Movement and looking
    "roll": "go",
    "bounce": "leave",
    "dip": "leave",
    "jet": "leave",
    "slide": "go",
    "mob": "go",
    "cruise": "go",
    "peep": "look",
    "scope": "look",
    "eyeball": "look",
    # People
    "homie": "friend",
    "homies": "friends",
    "dawg": "friend",
    "fam": "friend",
    "bro": "friend",
    "bruh": "friend",
    "gang": "crew",
    "squad": "crew",
    "clique": "crew",
    "opp": "enemy",
    "opps": "enemies",
    "snitch": "informant",
    "rat": "informant",
    # Agreement
    "bet": "yes",
    "aight": "okay",
    "ight": "okay",
    "word": "yes",
    "facts": "true",
    "fr": "for real",
    "deadass": "seriously",
    "nah": "no",
    "cap": "lie",
    "cappin": "lying",
    "trippin": "wrong",
    # Quality and intensity
    "fire": "good",
    "lit": "good",
    "dope": "good",
    "sick": "good",
    "lowkey": "somewhat",
    "highkey": "very",
    "mad": "very",
    "hella": "very",
    "sus": "suspicious",
    "sketch": "suspicious",
    "sketchy": "suspicious",
    "shady": "suspicious",
    "legit": "legitimate",
    "solid": "reliable",
    "weak": "bad",
    "trash": "bad",
    "wack": "bad",
    "lame": "bad",
    "whack": "bad",
    # Time
    "quick": "fast",
    "later": "soon",
    # Game terms
    "rep": "reputation",
    "cred": "reputation",
    "clout": "reputation",
    "respect": "reputation",
    "kit": "equipment",
    "ride": "vehicle",
    "whip": "vehicle",
    "turf": "territory",
    "block": "territory",
    "hood": "neighborhood",
    "spot": "location",
    "crib": "home",
    "pad": "home",
}

# Texting and gaming abbreviations
ABBREVIATIONS: dict[str, str] = {
    "u": "you",
    "ur": "your",
    "r": "are",
    "y": "why",
    "n": "and",
    "b": "be",
    "c": "see",
    "k": "okay",
    "w": "with",
    "w/": "with",
    "w/o": "without",
    "bc": "because",
    "cuz": "because",
    "tho": "though",
    "thru": "through",
    "pls": "please",
    "plz": "please",
    "thx": "thanks",
    "ty": "thank you",
    "np": "no problem",
    "nvm": "never mind",
    "idk": "i do not know",
    "ik": "i know",
    "ikr": "i know right",
    "idc": "i dont care",
    "imo": "in my opinion",
    "imho": "in my opinion",
    "tbh": "to be honest",
    "smh": "shaking my head",
    "ngl": "not gonna lie",
    "jk": "just kidding",
    "lol": "laughing",
    "lmao": "laughing",
    "rofl": "laughing",
    "brb": "be right back",
    "gtg": "got to go",
    "g2g": "got to go",
    "omg": "oh my god",
    "omw": "on my way",
    "wyd": "what you doing",
    "wya": "where you at",
    "hmu": "hit me up",
    "lmk": "let me know",
    "rn": "right now",
    "atm": "at the moment",
    "btw": "by the way",
    "fyi": "for your information",
    "afaik": "as far as i know",
    "iirc": "if i remember correctly",
    "fwiw": "for what its worth",
    "tldr": "summary",
    "eta": "estimated time",
    "asap": "as soon as possible",
    "aka": "also known as",
    "vs": "versus",
    "eg": "for example",
    # Game shorthand
    "xp": "experience points",
    "lvl": "level",
    "hp": "health",
    "dmg": "damage",
    "atk": "attack",
    "npc": "character",
    "pvp": "player versus player",
    "op": "overpowered",
    "nerf": "weaken",
    "buff": "strengthen",
    "gg": "good game",
    "gl": "good luck",
    "afk": "away",
    # Question words
    "wat": "what",
    "wut": "what",
    "wht": "what",
    "hw": "how",
    "wen": "when",
    "wer": "where",
    "hu": "who",
}

# Contractions, with and without the apostrophe
CONTRACTIONS: dict[str, str] = {
    "i'm": "i am",
    "im": "i am",
    "you're": "you are",
    "youre": "you are",
    "he's": "he is",
    "hes": "he is",
    "she's": "she is",
    "shes": "she is",
    "it's": "it is",
    "its": "it is",
    "we're": "we are",
    "they're": "they are",
    "theyre": "they are",
    "that's": "that is",
    "thats": "that is",
    "what's": "what is",
    "whats": "what is",
    "who's": "who is",
    "whos": "who is",
    "where's": "where is",
    "wheres": "where is",
    "how's": "how is",
    "hows": "how is",
    "here's": "here is",
    "heres": "here is",
    "there's": "there is",
    "theres": "there is",
    "i've": "i have",
    "ive": "i have",
    "you've": "you have",
    "youve": "you have",
    "we've": "we have",
    "they've": "they have",
    "i'll": "i will",
    "you'll": "you will",
    "youll": "you will",
    "he'll": "he will",
    "she'll": "she will",
    "it'll": "it will",
    "we'll": "we will",
    "they'll": "they will",
    "i'd": "i would",
    "you'd": "you would",
    "he'd": "he would",
    "she'd": "she would",
    "we'd": "we would",
    "they'd": "they would",
    "don't": "do not",
    "dont": "do not",
    "doesn't": "does not",
    "doesnt": "does not",
    "didn't": "did not",
    "didnt": "did not",
    "won't": "will not",
    "wont": "will not",
    "wouldn't": "would not",
    "wouldnt": "would not",
    "can't": "cannot",
    "cant": "cannot",
    "couldn't": "could not",
    "couldnt": "could not",
    "shouldn't": "should not",
    "shouldnt": "should not",
    "haven't": "have not",
    "havent": "have not",
    "hasn't": "has not",
    "hasnt": "has not",
    "isn't": "is not",
    "isnt": "is not",
    "aren't": "are not",
    "arent": "are not",
    "wasn't": "was not",
    "wasnt": "was not",
    "weren't": "were not",
    "let's": "let us",
    "lets": "let us",
    "ain't": "is not",
    "aint": "is not",
    "gonna": "going to",
    "gotta": "got to",
    "wanna": "want to",
    "gimme": "give me",
    "lemme": "let me",
    "kinda": "kind of",
    "sorta": "sort of",
    "outta": "out of",
    "coulda": "could have",
    "shoulda": "should have",
    "woulda": "would have",
    "hafta": "have to",
    "dunno": "do not know",
    "whatcha": "what are you",
    "gotcha": "got you",
    "tryna": "trying to",
    "finna": "going to",
    "boutta": "about to",
}

# Multi-word idioms, matched on whole-word boundaries, longest first
IDIOM_MAP: dict[str, str] = {
    # Money
    "need that paper": "need money",
    "stack paper": "earn money",
    "get paper": "earn money",
    "get this bread": "earn money",
    "secure the bag": "get money",
    "chase a bag": "pursue money",
    "make bank": "make money",
    "eating good": "successful",
    # Crime
    "making moves": "doing crimes",
    "hit a lick": "do a crime",
    "run a play": "do a scheme",
    "catch a play": "get an opportunity",
    "come up": "opportunity",
    "catch a body": "kill someone",
    "stake out": "scout",
    # Police and jail
    "catch a case": "get arrested",
    "do a bid": "go to jail",
    "locked up": "in jail",
    "behind bars": "in jail",
    "on the run": "fleeing police",
    "laying low": "hiding from police",
    "boys in blue": "police",
    "on my ass": "after me",
    "off the radar": "undetected",
    "under the radar": "undetected",
    # Talk
    "what it do": "sup",
    "whats good": "sup",
    "whats up": "sup",
    "what is up": "sup",
    "wassup": "sup",
    "whats poppin": "whats happening",
    "whats crackin": "whats happening",
    "whats the word": "any news",
    "word on the street": "rumors",
    "whats the move": "what should i do",
    "put me on": "tell me about",
    "plug me in": "connect me with",
    "run it down": "explain",
    "break it down": "explain",
    "school me": "teach me",
    "put me up on game": "teach me",
    "keep it real": "be honest",
    "keep it 100": "be honest",
    "keep it a buck": "be honest",
    "pull up": "arrive",
    "check out": "look",
    # Wants and plans
    "bout to": "about to",
    "need some": "need",
    "give me some": "give me",
    "hook me up": "help me",
    "help me out": "help me",
    "help a brother out": "help me",
    # Agreement
    "no doubt": "okay",
    "for sure": "yes definitely",
    "no cap": "true",
    "hell nah": "no",
    "my bad": "sorry",
    "its all good": "no problem",
    "all good": "no problem",
    "you feel me": "you understand",
    "feel me": "understand",
    "you know what im saying": "you understand",
    "know what i mean": "you understand",
    "na mean": "you understand",
    "real talk": "seriously",
    "on god": "i swear",
    "on my mama": "i swear",
    "no lie": "truthfully",
    "straight up": "honestly",
    # Time
    "in a min": "soon",
    "in a sec": "soon",
    # Caution
    "in the bag": "guaranteed",
    "in the cut": "hidden",
    "keep it on the low": "keep it secret",
    "on the low": "secretly",
    "stay strapped": "carry weapon",
    "stay ready": "be prepared",
    "stay woke": "be alert",
    "watch your back": "be careful",
    "watch your six": "be careful",
    "keep your head on a swivel": "be alert",
    "trust no one": "be suspicious",
    "trust nobody": "be suspicious",
}
