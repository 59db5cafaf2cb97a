"""Built-in word list used by the benchmark when no word file is given"""

WORDS = (
    "about", "above", "actor", "acute", "admit", "adopt", "adult", "after",
    "again", "agent", "agree", "ahead", "alarm", "album", "alert", "alike",
    "alive", "allow", "alone", "along", "alter", "among", "anger", "angle",
    "angry", "apart", "apple", "apply", "arena", "argue", "arise", "array",
    "aside", "asset", "audio", "audit", "avoid", "award", "aware", "badly",
    "baker", "basic", "beach", "began", "begin", "being", "below", "bench",
    "birth", "black", "blade", "blame", "blind", "block", "blood", "board",
    "boost", "booth", "bound", "brain", "brand", "bread", "break", "breed",
    "brief", "bring", "broad", "broke", "brown", "build", "built", "buyer",
    "cabin", "cable", "candy", "carry", "catch", "cause", "chain", "chair",
    "chart", "chase", "cheap", "check", "chest", "chief", "child", "china",
    "claim", "class", "clean", "clear", "climb", "clock", "close", "cloud",
    "coach", "coast", "could", "count", "court", "cover", "craft", "crane",
    "crash", "cream", "crime", "cross", "crowd", "crown", "curve", "cycle",
    "daily", "dance", "dated", "dealt", "death", "debut", "delay", "depth",
    "doing", "doubt", "dozen", "draft", "drama", "drawn", "dream", "dress",
    "drink", "drive", "drove", "dying", "eager", "early", "earth", "eight",
    "elite", "empty", "enemy", "enjoy", "enter", "entry", "equal", "erase",
    "error", "event", "every", "exact", "exist", "extra", "faith", "false",
    "fault", "fiber", "field", "fifth", "fifty", "fight", "final", "first",
    "flame", "flash", "fleet", "floor", "fluid", "focus", "force", "forth",
    "forty", "forum", "found", "frame", "frank", "fraud", "fresh", "front",
    "fruit", "fully", "funny", "giant", "given", "glass", "globe", "going",
    "grace", "grade", "grain", "grand", "grant", "grape", "grass", "great",
    "green", "gross", "group", "grown", "guard", "guess", "guest", "guide",
    "happy", "harsh", "heart", "heavy", "hence", "horse", "hotel", "house",
    "human", "ideal", "image", "index", "inner", "input", "issue", "joint",
    "judge", "juice", "known", "label", "large", "laser", "later", "laugh",
    "layer", "learn", "lease", "least", "leave", "legal", "lemon", "level",
    "light", "limit", "local", "logic", "loose", "lower", "lucky", "lunch",
    "magic", "major", "maker", "march", "match", "maybe", "mayor", "meant",
    "media", "metal", "might", "minor", "minus", "mixed", "model", "money",
    "month", "moral", "motor", "mount", "mouse", "mouth", "movie", "music",
    "needs", "never", "newly", "night", "noise", "north", "noted", "novel",
    "nurse", "occur", "ocean", "offer", "often", "order", "other", "ought",
    "outer", "owner", "paint", "panel", "paper", "party", "peace", "phase",
    "phone", "photo", "piano", "piece", "pilot", "pitch", "place", "plain",
    "plane", "plant", "plate", "point", "pound", "power", "press", "price",
    "pride", "prime", "print", "prior", "prize", "proof", "proud", "prove",
    "queen", "quick", "quiet", "quite", "radio", "raise", "range", "rapid",
    "ratio", "reach", "ready", "refer", "relax", "reply", "right", "river",
    "robot", "rough", "round", "route", "royal", "rural", "salad", "scale",
    "scene", "scope", "score", "sense", "serve", "seven", "shade", "shake",
    "shall", "shape", "share", "sharp", "sheep", "sheet", "shelf", "shell",
    "shift", "shine", "shirt", "shock", "shoot", "short", "shown", "sight",
    "since", "sixth", "sixty", "skill", "slate", "sleep", "slide", "small",
    "smart", "smile", "smoke", "solid", "solve", "sorry", "sound", "south",
    "space", "spare", "speak", "speed", "spend", "spent", "split", "spoke",
    "sport", "staff", "stage", "stake", "stand", "start", "state", "steam",
    "steel", "stick", "still", "stock", "stone", "stood", "store", "storm",
    "story", "strip", "stuck", "study", "stuff", "style", "sugar", "suite",
    "super", "sweet", "table", "taken", "taste", "teach", "teeth", "thank",
    "theft", "their", "theme", "there", "these", "thick", "thing", "think",
    "third", "those", "three", "threw", "throw", "tight", "timer", "title",
    "today", "topic", "total", "touch", "tough", "tower", "track", "trade",
    "train", "treat", "trend", "trial", "tried", "truck", "truly", "trust",
    "truth", "twice", "under", "union", "unity", "until", "upper", "upset",
    "urban", "usage", "usual", "valid", "value", "video", "virus", "visit",
    "vital", "voice", "waste", "watch", "water", "wheel", "where", "which",
    "while", "white", "whole", "whose", "woman", "world", "worry", "worse",
    "worst", "worth", "would", "wound", "write", "wrong", "wrote", "yield",
    "young", "youth",
)
