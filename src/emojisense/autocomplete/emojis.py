"""
Static shortcode tables, one mapping per category.

Keys are the raw shortcodes including their ``:`` delimiters; values are the
glyphs inserted on completion. Names must be unique across all categories.
"""

from typing import Dict


PEOPLE: Dict[str, str] = {
    ":smile:": "😄",
    ":smiley:": "😃",
    ":grinning:": "😀",
    ":blush:": "😊",
    ":wink:": "😉",
    ":heart_eyes:": "😍",
    ":kissing_heart:": "😘",
    ":relaxed:": "☺️",
    ":joy:": "😂",
    ":rofl:": "🤣",
    ":sweat_smile:": "😅",
    ":laughing:": "😆",
    ":innocent:": "😇",
    ":thinking:": "🤔",
    ":neutral_face:": "😐",
    ":expressionless:": "😑",
    ":unamused:": "😒",
    ":roll_eyes:": "🙄",
    ":grimacing:": "😬",
    ":relieved:": "😌",
    ":pensive:": "😔",
    ":sleepy:": "😪",
    ":sleeping:": "😴",
    ":mask:": "😷",
    ":nerd_face:": "🤓",
    ":sunglasses:": "😎",
    ":confused:": "😕",
    ":worried:": "😟",
    ":frowning:": "😦",
    ":open_mouth:": "😮",
    ":astonished:": "😲",
    ":flushed:": "😳",
    ":scream:": "😱",
    ":cry:": "😢",
    ":sob:": "😭",
    ":angry:": "😠",
    ":rage:": "😡",
    ":skull:": "💀",
    ":poop:": "💩",
    ":clown_face:": "🤡",
    ":ghost:": "👻",
    ":alien:": "👽",
    ":robot:": "🤖",
    ":wave:": "👋",
    ":ok_hand:": "👌",
    ":v:": "✌️",
    ":crossed_fingers:": "🤞",
    ":point_up:": "☝️",
    ":point_right:": "👉",
    ":thumbs_up:": "👍",
    ":+1:": "👍",
    ":thumbs_down:": "👎",
    ":-1:": "👎",
    ":clap:": "👏",
    ":raised_hands:": "🙌",
    ":pray:": "🙏",
    ":muscle:": "💪",
    ":eyes:": "👀",
    ":brain:": "🧠",
    ":man-shrugging:": "🤷‍♂️",
    ":woman-shrugging:": "🤷‍♀️",
    ":facepalm:": "🤦",
    ":baby:": "👶",
    ":older_adult:": "🧓",
    ":technologist:": "🧑‍💻",
    ":detective:": "🕵️",
    ":ninja:": "🥷",
    ":santa:": "🎅",
}

NATURE: Dict[str, str] = {
    ":dog:": "🐶",
    ":cat:": "🐱",
    ":mouse:": "🐭",
    ":hamster:": "🐹",
    ":rabbit:": "🐰",
    ":fox_face:": "🦊",
    ":bear:": "🐻",
    ":panda_face:": "🐼",
    ":koala:": "🐨",
    ":tiger:": "🐯",
    ":lion:": "🦁",
    ":cow:": "🐮",
    ":pig:": "🐷",
    ":frog:": "🐸",
    ":monkey_face:": "🐵",
    ":see_no_evil:": "🙈",
    ":chicken:": "🐔",
    ":penguin:": "🐧",
    ":bird:": "🐦",
    ":eagle:": "🦅",
    ":owl:": "🦉",
    ":wolf:": "🐺",
    ":horse:": "🐴",
    ":unicorn:": "🦄",
    ":bee:": "🐝",
    ":bug:": "🐛",
    ":butterfly:": "🦋",
    ":snail:": "🐌",
    ":turtle:": "🐢",
    ":snake:": "🐍",
    ":octopus:": "🐙",
    ":crab:": "🦀",
    ":whale:": "🐳",
    ":dolphin:": "🐬",
    ":fish:": "🐟",
    ":shark:": "🦈",
    ":cactus:": "🌵",
    ":evergreen_tree:": "🌲",
    ":palm_tree:": "🌴",
    ":seedling:": "🌱",
    ":herb:": "🌿",
    ":four_leaf_clover:": "🍀",
    ":maple_leaf:": "🍁",
    ":mushroom:": "🍄",
    ":rose:": "🌹",
    ":sunflower:": "🌻",
    ":cherry_blossom:": "🌸",
    ":sunny:": "☀️",
    ":cloud:": "☁️",
    ":zap:": "⚡",
    ":fire:": "🔥",
    ":snowflake:": "❄️",
    ":rainbow:": "🌈",
    ":droplet:": "💧",
    ":ocean:": "🌊",
    ":earth_africa:": "🌍",
    ":crescent_moon:": "🌙",
    ":star:": "⭐",
}

OBJECTS: Dict[str, str] = {
    ":watch:": "⌚",
    ":iphone:": "📱",
    ":computer:": "💻",
    ":keyboard:": "⌨️",
    ":desktop_computer:": "🖥️",
    ":printer:": "🖨️",
    ":floppy_disk:": "💾",
    ":cd:": "💿",
    ":camera:": "📷",
    ":movie_camera:": "🎥",
    ":telephone:": "☎️",
    ":tv:": "📺",
    ":radio:": "📻",
    ":hourglass:": "⌛",
    ":alarm_clock:": "⏰",
    ":battery:": "🔋",
    ":electric_plug:": "🔌",
    ":bulb:": "💡",
    ":flashlight:": "🔦",
    ":candle:": "🕯️",
    ":wrench:": "🔧",
    ":hammer:": "🔨",
    ":nut_and_bolt:": "🔩",
    ":gear:": "⚙️",
    ":link:": "🔗",
    ":lock:": "🔒",
    ":unlock:": "🔓",
    ":key:": "🔑",
    ":mag:": "🔍",
    ":microscope:": "🔬",
    ":telescope:": "🔭",
    ":pill:": "💊",
    ":syringe:": "💉",
    ":gift:": "🎁",
    ":balloon:": "🎈",
    ":tada:": "🎉",
    ":confetti_ball:": "🎊",
    ":trophy:": "🏆",
    ":medal:": "🏅",
    ":soccer:": "⚽",
    ":basketball:": "🏀",
    ":video_game:": "🎮",
    ":dart:": "🎯",
    ":guitar:": "🎸",
    ":headphones:": "🎧",
    ":books:": "📚",
    ":memo:": "📝",
    ":pencil2:": "✏️",
    ":scissors:": "✂️",
    ":paperclip:": "📎",
    ":pushpin:": "📌",
    ":calendar:": "📆",
    ":chart_with_upwards_trend:": "📈",
    ":clipboard:": "📋",
    ":package:": "📦",
    ":email:": "📧",
    ":bell:": "🔔",
    ":moneybag:": "💰",
    ":gem:": "💎",
    ":coffee:": "☕",
    ":pizza:": "🍕",
    ":beer:": "🍺",
    ":cake:": "🍰",
    ":apple:": "🍎",
}

PLACES: Dict[str, str] = {
    ":house:": "🏠",
    ":office:": "🏢",
    ":hospital:": "🏥",
    ":bank:": "🏦",
    ":school:": "🏫",
    ":church:": "⛪",
    ":castle:": "🏰",
    ":factory:": "🏭",
    ":stadium:": "🏟️",
    ":tent:": "⛺",
    ":statue_of_liberty:": "🗽",
    ":tokyo_tower:": "🗼",
    ":mount_fuji:": "🗻",
    ":volcano:": "🌋",
    ":desert_island:": "🏝️",
    ":beach_umbrella:": "🏖️",
    ":national_park:": "🏞️",
    ":city_sunset:": "🌇",
    ":night_with_stars:": "🌃",
    ":bridge_at_night:": "🌉",
    ":ferris_wheel:": "🎡",
    ":roller_coaster:": "🎢",
    ":fountain:": "⛲",
    ":car:": "🚗",
    ":taxi:": "🚕",
    ":bus:": "🚌",
    ":ambulance:": "🚑",
    ":fire_engine:": "🚒",
    ":police_car:": "🚓",
    ":truck:": "🚚",
    ":bike:": "🚲",
    ":motorcycle:": "🏍️",
    ":train:": "🚋",
    ":bullettrain_side:": "🚄",
    ":metro:": "🚇",
    ":airplane:": "✈️",
    ":helicopter:": "🚁",
    ":rocket:": "🚀",
    ":artificial_satellite:": "🛰️",
    ":boat:": "⛵",
    ":ship:": "🚢",
    ":anchor:": "⚓",
    ":fuelpump:": "⛽",
    ":construction:": "🚧",
    ":vertical_traffic_light:": "🚦",
    ":world_map:": "🗺️",
    ":checkered_flag:": "🏁",
    ":triangular_flag_on_post:": "🚩",
    ":crossed_flags:": "🎌",
    ":white_flag:": "🏳️",
    ":rainbow_flag:": "🏳️‍🌈",
}

SYMBOLS: Dict[str, str] = {
    ":heart:": "❤️",
    ":orange_heart:": "🧡",
    ":yellow_heart:": "💛",
    ":green_heart:": "💚",
    ":blue_heart:": "💙",
    ":purple_heart:": "💜",
    ":black_heart:": "🖤",
    ":broken_heart:": "💔",
    ":sparkling_heart:": "💖",
    ":100:": "💯",
    ":anger:": "💢",
    ":boom:": "💥",
    ":dizzy:": "💫",
    ":speech_balloon:": "💬",
    ":thought_balloon:": "💭",
    ":zzz:": "💤",
    ":sparkles:": "✨",
    ":white_check_mark:": "✅",
    ":heavy_check_mark:": "✔️",
    ":ballot_box_with_check:": "☑️",
    ":x:": "❌",
    ":negative_squared_cross_mark:": "❎",
    ":heavy_plus_sign:": "➕",
    ":heavy_minus_sign:": "➖",
    ":heavy_division_sign:": "➗",
    ":heavy_multiplication_x:": "✖️",
    ":question:": "❓",
    ":grey_question:": "❔",
    ":exclamation:": "❗",
    ":bangbang:": "‼️",
    ":warning:": "⚠️",
    ":no_entry:": "⛔",
    ":no_entry_sign:": "🚫",
    ":recycle:": "♻️",
    ":infinity:": "♾️",
    ":copyright:": "©️",
    ":registered:": "®️",
    ":tm:": "™️",
    ":arrow_up:": "⬆️",
    ":arrow_down:": "⬇️",
    ":arrow_left:": "⬅️",
    ":arrow_right:": "➡️",
    ":arrows_counterclockwise:": "🔄",
    ":repeat:": "🔁",
    ":twisted_rightwards_arrows:": "🔀",
    ":fast_forward:": "⏩",
    ":rewind:": "⏪",
    ":arrow_forward:": "▶️",
    ":pause_button:": "⏸️",
    ":stop_button:": "⏹️",
    ":red_circle:": "🔴",
    ":large_blue_circle:": "🔵",
    ":white_circle:": "⚪",
    ":black_circle:": "⚫",
    ":large_orange_diamond:": "🔶",
    ":small_blue_diamond:": "🔹",
    ":new:": "🆕",
    ":free:": "🆓",
    ":up:": "🆙",
    ":cool:": "🆒",
    ":ok:": "🆗",
    ":sos:": "🆘",
    ":information_source:": "ℹ️",
    ":hash:": "#️⃣",
    ":one:": "1️⃣",
    ":two:": "2️⃣",
    ":three:": "3️⃣",
    ":keycap_ten:": "🔟",
}
