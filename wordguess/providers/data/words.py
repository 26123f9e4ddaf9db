# Common five-letter English words used when no word list file is configured.

DEFAULT_WORDS = (
    "ABOUT", "ABOVE", "ACTOR", "ACUTE", "ADMIT", "ADOPT", "ADULT", "AFTER",
    "AGAIN", "AGENT", "AGREE", "AHEAD", "ALARM", "ALBUM", "ALERT", "ALIKE",
    "ALIVE", "ALLOW", "ALLOY", "ALONE", "ALONG", "ALTER", "AMONG", "ANGER",
    "ANGLE", "ANGRY", "APART", "APPLE", "APPLY", "ARENA", "ARGUE", "ARISE",
    "ARRAY", "ASIDE", "ASSET", "AUDIO", "AVOID", "AWARD", "AWARE", "BADLY",
    "BAKER", "BASIC", "BEACH", "BEGIN", "BEING", "BELOW", "BENCH", "BIRTH",
    "BLACK", "BLAME", "BLIND", "BLOCK", "BLOOD", "BOARD", "BOOST", "BRAIN",
    "BRAND", "BREAD", "BREAK", "BRICK", "BRIEF", "BRING", "BROAD", "BROWN",
    "BUILD", "BUYER", "CABLE", "CARRY", "CATCH", "CAUSE", "CHAIN", "CHAIR",
    "CHART", "CHASE", "CHEAP", "CHECK", "CHEST", "CHIEF", "CHILD", "CHOSE",
    "CIVIL", "CLAIM", "CLASS", "CLEAN", "CLEAR", "CLIMB", "CLOCK", "CLOSE",
    "COACH", "COAST", "COUNT", "COURT", "COVER", "CRAFT", "CRANE", "CRASH",
    "CRAZY", "CREAM", "CRIME", "CROSS", "CROWD", "CROWN", "CURVE", "CYCLE",
    "DAILY", "DANCE", "DEATH", "DELAY", "DEPTH", "DOUBT", "DOZEN", "DRAFT",
    "DRAMA", "DREAM", "DRESS", "DRINK", "DRIVE", "EARLY", "EARTH", "EIGHT",
    "ELITE", "EMPTY", "ENEMY", "ENJOY", "ENTER", "ENTRY", "EQUAL", "ERROR",
    "EVENT", "EVERY", "EXACT", "EXIST", "EXTRA", "FAITH", "FALSE", "FAULT",
    "FIELD", "FIFTY", "FIGHT", "FINAL", "FIRST", "FLAME", "FLASH", "FLEET",
    "FLOOR", "FLUID", "FOCUS", "FORCE", "FRAME", "FRESH", "FRONT", "FRUIT",
    "FUNNY", "GHOST", "GIANT", "GIVEN", "GLASS", "GLOBE", "GRACE", "GRADE",
    "GRAND", "GRANT", "GRASS", "GREAT", "GREEN", "GROSS", "GROUP", "GUARD",
    "GUESS", "GUEST", "GUIDE", "HAPPY", "HEART", "HEAVY", "HORSE", "HOTEL",
    "HOUSE", "HUMAN", "IDEAL", "IMAGE", "INDEX", "INNER", "INPUT", "ISSUE",
    "JOINT", "JUDGE", "KNIFE", "LARGE", "LASER", "LATER", "LAUGH", "LAYER",
    "LEARN", "LEAST", "LEAVE", "LEGAL", "LEMON", "LEVEL", "LIGHT", "LIMIT",
    "LLAMA", "LOCAL", "LOGIC", "LOOSE", "LUCKY", "LUNCH", "MAGIC", "MAJOR",
    "MAKER", "MARCH", "MATCH", "MAYBE", "MAYOR", "MEANT", "MEDIA", "METAL",
    "MIGHT", "MINOR", "MODEL", "MONEY", "MONTH", "MORAL", "MOTOR", "MOUNT",
    "MOUSE", "MOUTH", "MOVIE", "MUSIC", "NEEDS", "NEVER", "NIGHT", "NOISE",
    "NORTH", "NOVEL", "NURSE", "OCEAN", "OFFER", "OFTEN", "ORDER", "OTHER",
    "OWNER", "PAINT", "PANEL", "PAPER", "PARTY", "PEACE", "PHASE", "PHONE",
    "PIANO", "PIECE", "PILOT", "PITCH", "PLACE", "PLAIN", "PLANE", "PLANT",
    "PLATE", "POINT", "POUND", "POWER", "PRESS", "PRICE", "PRIDE", "PRIME",
    "PRINT", "PRIOR", "PRIZE", "PROOF", "PROUD", "QUEEN", "QUICK", "QUIET",
    "QUITE", "RADIO", "RAISE", "RANGE", "RAPID", "RATIO", "REACH", "REACT",
    "READY", "REFER", "RIGHT", "RIVER", "ROBOT", "ROUGH", "ROUND", "ROUTE",
    "ROYAL", "RURAL", "SCALE", "SCENE", "SCOPE", "SCORE", "SENSE", "SERVE",
    "SEVEN", "SHADE", "SHAKE", "SHAPE", "SHARE", "SHARP", "SHEEP", "SHEET",
    "SHELF", "SHELL", "SHIFT", "SHIRT", "SHOCK", "SHOOT", "SHORT", "SIGHT",
    "SKILL", "SLEEP", "SLIDE", "SMALL", "SMART", "SMILE", "SMOKE", "SOLID",
    "SOLVE", "SOUND", "SOUTH", "SPACE", "SPARE", "SPEAK", "SPEED", "SPEND",
    "SPLIT", "SPORT", "STAFF", "STAGE", "STAND", "START", "STATE", "STEAM",
    "STEEL", "STICK", "STILL", "STOCK", "STONE", "STORE", "STORM", "STORY",
    "STRIP", "STUDY", "STUFF", "STYLE", "SUGAR", "SUITE", "SUPER", "SWEET",
    "TABLE", "TASTE", "TEACH", "THANK", "THEME", "THICK", "THING", "THINK",
    "THIRD", "THREE", "THROW", "TIGER", "TIGHT", "TIRED", "TITLE", "TODAY",
    "TOPIC", "TOTAL", "TOUCH", "TOUGH", "TOWER", "TRACK", "TRADE", "TRAIN",
    "TREAT", "TREND", "TRIAL", "TRUCK", "TRULY", "TRUST", "TRUTH", "TWICE",
    "UNCLE", "UNDER", "UNION", "UNITY", "UNTIL", "UPPER", "UPSET", "URBAN",
    "USUAL", "VALUE", "VIDEO", "VISIT", "VITAL", "VOICE", "WASTE", "WATCH",
    "WATER", "WHEEL", "WHERE", "WHICH", "WHILE", "WHITE", "WHOLE", "WHOSE",
    "WOMAN", "WORLD", "WORRY", "WORTH", "WOULD", "WOUND", "WRITE", "WRONG",
    "YIELD", "YOUNG", "YOUTH",
)
