"""Named colours and conversion of RGB values to visual pixel values."""

from __future__ import annotations

from typing import NamedTuple, Optional

_WHITESPACE = " \t\n\v\f\r"
_NAME_BUFFER = 64
_LONG_MAX = (1 << 63) - 1
_LONG_MIN = -(1 << 63)

# Each line holds a hexadecimal value and the colour name it belongs to.
# Some names appear more than once; the first entry wins on lookup.
_COLOR_TABLE = """
fffafa snow
f8f8ff ghost white
f8f8ff ghostwhite
f5f5f5 white smoke
f5f5f5 whitesmoke
dcdcdc gainsboro
fffaf0 floral white
fffaf0 floralwhite
fdf5e6 old lace
fdf5e6 oldlace
faf0e6 linen
faebd7 antique white
faebd7 antiquewhite
ffefd5 papaya whip
ffefd5 papayawhip
ffebcd blanched almond
ffebcd blanchedalmond
ffe4c4 bisque
ffdab9 peach puff
ffdab9 peachpuff
ffdead navajo white
ffdead navajowhite
ffe4b5 moccasin
fff8dc cornsilk
fffff0 ivory
fffacd lemon chiffon
fffacd lemonchiffon
fff5ee seashell
f0fff0 honeydew
f5fffa mint cream
f5fffa mintcream
f0ffff azure
f0f8ff alice blue
f0f8ff aliceblue
e6e6fa lavender
fff0f5 lavender blush
fff0f5 lavenderblush
ffe4e1 misty rose
ffe4e1 mistyrose
ffffff white
0 black
2f4f4f dark slate
2f4f4f darkslategray
2f4f4f dark slate
2f4f4f darkslategrey
696969 dim gray
696969 dimgray
696969 dim grey
696969 dimgrey
708090 slate gray
708090 slategray
708090 slate grey
708090 slategrey
778899 light slate
778899 lightslategray
778899 light slate
778899 lightslategrey
bebebe gray
bebebe grey
d3d3d3 light grey
d3d3d3 lightgrey
d3d3d3 light gray
d3d3d3 lightgray
191970 midnight blue
191970 midnightblue
80 navy
80 navy blue
80 navyblue
6495ed cornflower blue
6495ed cornflowerblue
483d8b dark slate
483d8b darkslateblue
6a5acd slate blue
6a5acd slateblue
7b68ee medium slate
7b68ee mediumslateblue
8470ff light slate
8470ff lightslateblue
cd medium blue
cd mediumblue
4169e1 royal blue
4169e1 royalblue
ff blue
1e90ff dodger blue
1e90ff dodgerblue
bfff deep sky
bfff deepskyblue
87ceeb sky blue
87ceeb skyblue
87cefa light sky
87cefa lightskyblue
4682b4 steel blue
4682b4 steelblue
b0c4de light steel
b0c4de lightsteelblue
add8e6 light blue
add8e6 lightblue
b0e0e6 powder blue
b0e0e6 powderblue
afeeee pale turquoise
afeeee paleturquoise
ced1 dark turquoise
ced1 darkturquoise
48d1cc medium turquoise
48d1cc mediumturquoise
40e0d0 turquoise
ffff cyan
e0ffff light cyan
e0ffff lightcyan
5f9ea0 cadet blue
5f9ea0 cadetblue
66cdaa medium aquamarine
66cdaa mediumaquamarine
7fffd4 aquamarine
6400 dark green
6400 darkgreen
556b2f dark olive
556b2f darkolivegreen
8fbc8f dark sea
8fbc8f darkseagreen
2e8b57 sea green
2e8b57 seagreen
3cb371 medium sea
3cb371 mediumseagreen
20b2aa light sea
20b2aa lightseagreen
98fb98 pale green
98fb98 palegreen
ff7f spring green
ff7f springgreen
7cfc00 lawn green
7cfc00 lawngreen
ff00 green
7fff00 chartreuse
fa9a medium spring
fa9a mediumspringgreen
adff2f green yellow
adff2f greenyellow
32cd32 lime green
32cd32 limegreen
9acd32 yellow green
9acd32 yellowgreen
228b22 forest green
228b22 forestgreen
6b8e23 olive drab
6b8e23 olivedrab
bdb76b dark khaki
bdb76b darkkhaki
f0e68c khaki
eee8aa pale goldenrod
eee8aa palegoldenrod
fafad2 light goldenrod
fafad2 lightgoldenrodyellow
ffffe0 light yellow
ffffe0 lightyellow
ffff00 yellow
ffd700 gold
eedd82 light goldenrod
eedd82 lightgoldenrod
daa520 goldenrod
b8860b dark goldenrod
b8860b darkgoldenrod
bc8f8f rosy brown
bc8f8f rosybrown
cd5c5c indian red
cd5c5c indianred
8b4513 saddle brown
8b4513 saddlebrown
a0522d sienna
cd853f peru
deb887 burlywood
f5f5dc beige
f5deb3 wheat
f4a460 sandy brown
f4a460 sandybrown
d2b48c tan
d2691e chocolate
b22222 firebrick
a52a2a brown
e9967a dark salmon
e9967a darksalmon
fa8072 salmon
ffa07a light salmon
ffa07a lightsalmon
ffa500 orange
ff8c00 dark orange
ff8c00 darkorange
ff7f50 coral
f08080 light coral
f08080 lightcoral
ff6347 tomato
ff4500 orange red
ff4500 orangered
ff0000 red
ff69b4 hot pink
ff69b4 hotpink
ff1493 deep pink
ff1493 deeppink
ffc0cb pink
ffb6c1 light pink
ffb6c1 lightpink
db7093 pale violet
db7093 palevioletred
b03060 maroon
c71585 medium violet
c71585 mediumvioletred
d02090 violet red
d02090 violetred
ff00ff magenta
ee82ee violet
dda0dd plum
da70d6 orchid
ba55d3 medium orchid
ba55d3 mediumorchid
9932cc dark orchid
9932cc darkorchid
9400d3 dark violet
9400d3 darkviolet
8a2be2 blue violet
8a2be2 blueviolet
a020f0 purple
9370db medium purple
9370db mediumpurple
d8bfd8 thistle
fffafa snow1
eee9e9 snow2
cdc9c9 snow3
8b8989 snow4
fff5ee seashell1
eee5de seashell2
cdc5bf seashell3
8b8682 seashell4
ffefdb antiquewhite1
eedfcc antiquewhite2
cdc0b0 antiquewhite3
8b8378 antiquewhite4
ffe4c4 bisque1
eed5b7 bisque2
cdb79e bisque3
8b7d6b bisque4
ffdab9 peachpuff1
eecbad peachpuff2
cdaf95 peachpuff3
8b7765 peachpuff4
ffdead navajowhite1
eecfa1 navajowhite2
cdb38b navajowhite3
8b795e navajowhite4
fffacd lemonchiffon1
eee9bf lemonchiffon2
cdc9a5 lemonchiffon3
8b8970 lemonchiffon4
fff8dc cornsilk1
eee8cd cornsilk2
cdc8b1 cornsilk3
8b8878 cornsilk4
fffff0 ivory1
eeeee0 ivory2
cdcdc1 ivory3
8b8b83 ivory4
f0fff0 honeydew1
e0eee0 honeydew2
c1cdc1 honeydew3
838b83 honeydew4
fff0f5 lavenderblush1
eee0e5 lavenderblush2
cdc1c5 lavenderblush3
8b8386 lavenderblush4
ffe4e1 mistyrose1
eed5d2 mistyrose2
cdb7b5 mistyrose3
8b7d7b mistyrose4
f0ffff azure1
e0eeee azure2
c1cdcd azure3
838b8b azure4
836fff slateblue1
7a67ee slateblue2
6959cd slateblue3
473c8b slateblue4
4876ff royalblue1
436eee royalblue2
3a5fcd royalblue3
27408b royalblue4
ff blue1
ee blue2
cd blue3
8b blue4
1e90ff dodgerblue1
1c86ee dodgerblue2
1874cd dodgerblue3
104e8b dodgerblue4
63b8ff steelblue1
5cacee steelblue2
4f94cd steelblue3
36648b steelblue4
bfff deepskyblue1
b2ee deepskyblue2
9acd deepskyblue3
688b deepskyblue4
87ceff skyblue1
7ec0ee skyblue2
6ca6cd skyblue3
4a708b skyblue4
b0e2ff lightskyblue1
a4d3ee lightskyblue2
8db6cd lightskyblue3
607b8b lightskyblue4
c6e2ff slategray1
b9d3ee slategray2
9fb6cd slategray3
6c7b8b slategray4
cae1ff lightsteelblue1
bcd2ee lightsteelblue2
a2b5cd lightsteelblue3
6e7b8b lightsteelblue4
bfefff lightblue1
b2dfee lightblue2
9ac0cd lightblue3
68838b lightblue4
e0ffff lightcyan1
d1eeee lightcyan2
b4cdcd lightcyan3
7a8b8b lightcyan4
bbffff paleturquoise1
aeeeee paleturquoise2
96cdcd paleturquoise3
668b8b paleturquoise4
98f5ff cadetblue1
8ee5ee cadetblue2
7ac5cd cadetblue3
53868b cadetblue4
f5ff turquoise1
e5ee turquoise2
c5cd turquoise3
868b turquoise4
ffff cyan1
eeee cyan2
cdcd cyan3
8b8b cyan4
97ffff darkslategray1
8deeee darkslategray2
79cdcd darkslategray3
528b8b darkslategray4
7fffd4 aquamarine1
76eec6 aquamarine2
66cdaa aquamarine3
458b74 aquamarine4
c1ffc1 darkseagreen1
b4eeb4 darkseagreen2
9bcd9b darkseagreen3
698b69 darkseagreen4
54ff9f seagreen1
4eee94 seagreen2
43cd80 seagreen3
2e8b57 seagreen4
9aff9a palegreen1
90ee90 palegreen2
7ccd7c palegreen3
548b54 palegreen4
ff7f springgreen1
ee76 springgreen2
cd66 springgreen3
8b45 springgreen4
ff00 green1
ee00 green2
cd00 green3
8b00 green4
7fff00 chartreuse1
76ee00 chartreuse2
66cd00 chartreuse3
458b00 chartreuse4
c0ff3e olivedrab1
b3ee3a olivedrab2
9acd32 olivedrab3
698b22 olivedrab4
caff70 darkolivegreen1
bcee68 darkolivegreen2
a2cd5a darkolivegreen3
6e8b3d darkolivegreen4
fff68f khaki1
eee685 khaki2
cdc673 khaki3
8b864e khaki4
ffec8b lightgoldenrod1
eedc82 lightgoldenrod2
cdbe70 lightgoldenrod3
8b814c lightgoldenrod4
ffffe0 lightyellow1
eeeed1 lightyellow2
cdcdb4 lightyellow3
8b8b7a lightyellow4
ffff00 yellow1
eeee00 yellow2
cdcd00 yellow3
8b8b00 yellow4
ffd700 gold1
eec900 gold2
cdad00 gold3
8b7500 gold4
ffc125 goldenrod1
eeb422 goldenrod2
cd9b1d goldenrod3
8b6914 goldenrod4
ffb90f darkgoldenrod1
eead0e darkgoldenrod2
cd950c darkgoldenrod3
8b6508 darkgoldenrod4
ffc1c1 rosybrown1
eeb4b4 rosybrown2
cd9b9b rosybrown3
8b6969 rosybrown4
ff6a6a indianred1
ee6363 indianred2
cd5555 indianred3
8b3a3a indianred4
ff8247 sienna1
ee7942 sienna2
cd6839 sienna3
8b4726 sienna4
ffd39b burlywood1
eec591 burlywood2
cdaa7d burlywood3
8b7355 burlywood4
ffe7ba wheat1
eed8ae wheat2
cdba96 wheat3
8b7e66 wheat4
ffa54f tan1
ee9a49 tan2
cd853f tan3
8b5a2b tan4
ff7f24 chocolate1
ee7621 chocolate2
cd661d chocolate3
8b4513 chocolate4
ff3030 firebrick1
ee2c2c firebrick2
cd2626 firebrick3
8b1a1a firebrick4
ff4040 brown1
ee3b3b brown2
cd3333 brown3
8b2323 brown4
ff8c69 salmon1
ee8262 salmon2
cd7054 salmon3
8b4c39 salmon4
ffa07a lightsalmon1
ee9572 lightsalmon2
cd8162 lightsalmon3
8b5742 lightsalmon4
ffa500 orange1
ee9a00 orange2
cd8500 orange3
8b5a00 orange4
ff7f00 darkorange1
ee7600 darkorange2
cd6600 darkorange3
8b4500 darkorange4
ff7256 coral1
ee6a50 coral2
cd5b45 coral3
8b3e2f coral4
ff6347 tomato1
ee5c42 tomato2
cd4f39 tomato3
8b3626 tomato4
ff4500 orangered1
ee4000 orangered2
cd3700 orangered3
8b2500 orangered4
ff0000 red1
ee0000 red2
cd0000 red3
8b0000 red4
ff1493 deeppink1
ee1289 deeppink2
cd1076 deeppink3
8b0a50 deeppink4
ff6eb4 hotpink1
ee6aa7 hotpink2
cd6090 hotpink3
8b3a62 hotpink4
ffb5c5 pink1
eea9b8 pink2
cd919e pink3
8b636c pink4
ffaeb9 lightpink1
eea2ad lightpink2
cd8c95 lightpink3
8b5f65 lightpink4
ff82ab palevioletred1
ee799f palevioletred2
cd6889 palevioletred3
8b475d palevioletred4
ff34b3 maroon1
ee30a7 maroon2
cd2990 maroon3
8b1c62 maroon4
ff3e96 violetred1
ee3a8c violetred2
cd3278 violetred3
8b2252 violetred4
ff00ff magenta1
ee00ee magenta2
cd00cd magenta3
8b008b magenta4
ff83fa orchid1
ee7ae9 orchid2
cd69c9 orchid3
8b4789 orchid4
ffbbff plum1
eeaeee plum2
cd96cd plum3
8b668b plum4
e066ff mediumorchid1
d15fee mediumorchid2
b452cd mediumorchid3
7a378b mediumorchid4
bf3eff darkorchid1
b23aee darkorchid2
9a32cd darkorchid3
68228b darkorchid4
9b30ff purple1
912cee purple2
7d26cd purple3
551a8b purple4
ab82ff mediumpurple1
9f79ee mediumpurple2
8968cd mediumpurple3
5d478b mediumpurple4
ffe1ff thistle1
eed2ee thistle2
cdb5cd thistle3
8b7b8b thistle4
0 gray0
0 grey0
30303 gray1
30303 grey1
50505 gray2
50505 grey2
80808 gray3
80808 grey3
a0a0a gray4
a0a0a grey4
d0d0d gray5
d0d0d grey5
f0f0f gray6
f0f0f grey6
121212 gray7
121212 grey7
141414 gray8
141414 grey8
171717 gray9
171717 grey9
1a1a1a gray10
1a1a1a grey10
1c1c1c gray11
1c1c1c grey11
1f1f1f gray12
1f1f1f grey12
212121 gray13
212121 grey13
242424 gray14
242424 grey14
262626 gray15
262626 grey15
292929 gray16
292929 grey16
2b2b2b gray17
2b2b2b grey17
2e2e2e gray18
2e2e2e grey18
303030 gray19
303030 grey19
333333 gray20
333333 grey20
363636 gray21
363636 grey21
383838 gray22
383838 grey22
3b3b3b gray23
3b3b3b grey23
3d3d3d gray24
3d3d3d grey24
404040 gray25
404040 grey25
424242 gray26
424242 grey26
454545 gray27
454545 grey27
474747 gray28
474747 grey28
4a4a4a gray29
4a4a4a grey29
4d4d4d gray30
4d4d4d grey30
4f4f4f gray31
4f4f4f grey31
525252 gray32
525252 grey32
545454 gray33
545454 grey33
575757 gray34
575757 grey34
595959 gray35
595959 grey35
5c5c5c gray36
5c5c5c grey36
5e5e5e gray37
5e5e5e grey37
616161 gray38
616161 grey38
636363 gray39
636363 grey39
666666 gray40
666666 grey40
696969 gray41
696969 grey41
6b6b6b gray42
6b6b6b grey42
6e6e6e gray43
6e6e6e grey43
707070 gray44
707070 grey44
737373 gray45
737373 grey45
757575 gray46
757575 grey46
787878 gray47
787878 grey47
7a7a7a gray48
7a7a7a grey48
7d7d7d gray49
7d7d7d grey49
7f7f7f gray50
7f7f7f grey50
828282 gray51
828282 grey51
858585 gray52
858585 grey52
878787 gray53
878787 grey53
8a8a8a gray54
8a8a8a grey54
8c8c8c gray55
8c8c8c grey55
8f8f8f gray56
8f8f8f grey56
919191 gray57
919191 grey57
949494 gray58
949494 grey58
969696 gray59
969696 grey59
999999 gray60
999999 grey60
9c9c9c gray61
9c9c9c grey61
9e9e9e gray62
9e9e9e grey62
a1a1a1 gray63
a1a1a1 grey63
a3a3a3 gray64
a3a3a3 grey64
a6a6a6 gray65
a6a6a6 grey65
a8a8a8 gray66
a8a8a8 grey66
ababab gray67
ababab grey67
adadad gray68
adadad grey68
b0b0b0 gray69
b0b0b0 grey69
b3b3b3 gray70
b3b3b3 grey70
b5b5b5 gray71
b5b5b5 grey71
b8b8b8 gray72
b8b8b8 grey72
bababa gray73
bababa grey73
bdbdbd gray74
bdbdbd grey74
bfbfbf gray75
bfbfbf grey75
c2c2c2 gray76
c2c2c2 grey76
c4c4c4 gray77
c4c4c4 grey77
c7c7c7 gray78
c7c7c7 grey78
c9c9c9 gray79
c9c9c9 grey79
cccccc gray80
cccccc grey80
cfcfcf gray81
cfcfcf grey81
d1d1d1 gray82
d1d1d1 grey82
d4d4d4 gray83
d4d4d4 grey83
d6d6d6 gray84
d6d6d6 grey84
d9d9d9 gray85
d9d9d9 grey85
dbdbdb gray86
dbdbdb grey86
dedede gray87
dedede grey87
e0e0e0 gray88
e0e0e0 grey88
e3e3e3 gray89
e3e3e3 grey89
e5e5e5 gray90
e5e5e5 grey90
e8e8e8 gray91
e8e8e8 grey91
ebebeb gray92
ebebeb grey92
ededed gray93
ededed grey93
f0f0f0 gray94
f0f0f0 grey94
f2f2f2 gray95
f2f2f2 grey95
f5f5f5 gray96
f5f5f5 grey96
f7f7f7 gray97
f7f7f7 grey97
fafafa gray98
fafafa grey98
fcfcfc gray99
fcfcfc grey99
ffffff gray100
ffffff grey100
a9a9a9 dark grey
a9a9a9 darkgrey
a9a9a9 dark gray
a9a9a9 darkgray
8b dark blue
8b darkblue
8b8b dark cyan
8b8b darkcyan
8b008b dark magenta
8b008b darkmagenta
8b0000 dark red
8b0000 darkred
90ee90 light green
90ee90 lightgreen
-1 none
"""


def _build_table() -> dict[str, int]:
    table: dict[str, int] = {}
    for line in _COLOR_TABLE.strip().splitlines():
        value, name = line.split(maxsplit=1)
        table.setdefault(name.lower(), int(value, 16))
    return table


_COLORS = _build_table()


class RgbShifts(NamedTuple):
    """Position and width of each colour channel inside a pixel value."""

    red_shift: int
    red_bits: int
    green_shift: int
    green_bits: int
    blue_shift: int
    blue_bits: int


def lookup_color(name: str) -> int:
    """Return the 0xRRGGBB value of a named colour, ignoring case.

    The name "none" maps to -1. Unknown names raise KeyError.
    """
    return _COLORS[name.lower()]


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def _parse_hex_prefix(text: str) -> int:
    """Parse the leading hexadecimal number of ``text`` the way strtol does."""
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        sign = -1 if rest[0] == "-" else 1
        rest = rest[1:]
    if rest[:2].lower() == "0x" and rest[2:3] and rest[2] in "0123456789abcdefABCDEF":
        rest = rest[2:]
    digits = ""
    for char in rest:
        if char not in "0123456789abcdefABCDEF":
            break
        digits += char
    if not digits:
        return 0
    value = sign * int(digits, 16)
    return _to_int32(min(max(value, _LONG_MIN), _LONG_MAX))


def text_to_rgb(name: str, end: Optional[str]) -> int:
    """Turn an XPM colour specification into a 0xRRGGBB value.

    A leading '#' introduces a hexadecimal value. Otherwise ``name`` and the
    optional following word ``end`` are joined by a space and looked up in the
    colour table; unknown names give 0.
    """
    if name.startswith("#"):
        return _parse_hex_prefix(name[1:])
    if end is not None:
        name = f"{name} {end}"[: _NAME_BUFFER - 1]
    return _COLORS.get(name.lower(), 0)


def _mask_layout(mask: int) -> tuple[int, int]:
    if mask <= 0:
        raise ValueError(f"colour mask must be a positive integer, got {mask!r}")
    shift = 0
    while not mask & 1:
        mask >>= 1
        shift += 1
    bits = 0
    while mask & 1:
        mask >>= 1
        bits += 1
    return shift, bits


def rgb_shifts(red_mask: int, green_mask: int, blue_mask: int) -> RgbShifts:
    """Derive channel shifts and widths from a visual's colour masks."""
    red = _mask_layout(red_mask)
    green = _mask_layout(green_mask)
    blue = _mask_layout(blue_mask)
    return RgbShifts(*red, *green, *blue)


def good_color(color: int, depth: int, shifts: RgbShifts) -> int:
    """Convert a 0xRRGGBB colour into a pixel value for a visual.

    Visuals of depth 24 or more take the colour unchanged; shallower ones get
    each channel scaled down and moved into place according to ``shifts``.
    """
    if depth >= 24:
        return color
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    red_shift, red_bits, green_shift, green_bits, blue_shift, blue_bits = shifts
    return (
        ((red >> (16 - red_bits)) << red_shift)
        + ((green >> (16 - green_bits)) << green_shift)
        + ((blue >> (16 - blue_bits)) << blue_shift)
    )