"""Named RGB colours, numbered in alphabetical order."""

from __future__ import annotations

from enum import IntEnum


class RgbColor(IntEnum):
    """The 146 named colours, numbered from zero."""

    ALICEBLUE = 0
    ANTIQUEWHITE = 1
    AQUA = 2
    AQUAMARINE = 3
    AZURE = 4
    BEIGE = 5
    BISQUE = 6
    BLACK = 7
    BLANCHEDALMOND = 8
    BLUE = 9
    BLUEVIOLET = 10
    BROWN = 11
    BURLYWOOD = 12
    CADETBLUE = 13
    CHARTREUSE = 14
    CHOCOLATE = 15
    CORAL = 16
    CORNFLOWERBLUE = 17
    CORNSILK = 18
    CRIMSON = 19
    CYAN = 20
    DARKBLUE = 21
    DARKCYAN = 22
    DARKGOLDENROD = 23
    DARKGRAY = 24
    DARKGREEN = 25
    DARKGREY = 26
    DARKKHAKI = 27
    DARKMAGENTA = 28
    DARKOLIVEGREEN = 29
    DARKORANGE = 30
    DARKORCHID = 31
    DARKRED = 32
    DARKSALMON = 33
    DARKSEAGREEN = 34
    DARKSLATEBLUE = 35
    DARKSLATEGRAY = 36
    DARKSLATEGREY = 37
    DARKTURQUOISE = 38
    DARKVIOLET = 39
    DEEPPINK = 40
    DEEPSKYBLUE = 41
    DIMGRAY = 42
    DIMGREY = 43
    DODGERBLUE = 44
    FIREBRICK = 45
    FLORALWHITE = 46
    FORESTGREEN = 47
    FUCHSIA = 48
    GAINSBORO = 49
    GHOSTWHITE = 50
    GOLD = 51
    GOLDENROD = 52
    GRAY = 53
    GREEN = 54
    GREENYELLOW = 55
    GREY = 56
    HONEYDEW = 57
    HOTPINK = 58
    INDIANRED = 59
    INDIGO = 60
    IVORY = 61
    KHAKI = 62
    LAVENDER = 63
    LAVENDERBLUSH = 64
    LAWNGREEN = 65
    LEMONCHIFFON = 66
    LIGHTBLUE = 67
    LIGHTCORAL = 68
    LIGHTCYAN = 69
    LIGHTGOLDENRODYELLOW = 70
    LIGHTGRAY = 71
    LIGHTGREEN = 72
    LIGHTGREY = 73
    LIGHTPINK = 74
    LIGHTSALMON = 75
    LIGHTSEAGREEN = 76
    LIGHTSKYBLUE = 77
    LIGHTSLATEGRAY = 78
    LIGHTSLATEGREY = 79
    LIGHTSTEELBLUE = 80
    LIGHTYELLOW = 81
    LIME = 82
    LIMEGREEN = 83
    LINEN = 84
    MAGENTA = 85
    MAROON = 86
    MEDIUMAQUAMARINE = 87
    MEDIUMBLUE = 88
    MEDIUMORCHID = 89
    MEDIUMPURPLE = 90
    MEDIUMSEAGREEN = 91
    MEDIUMSLATEBLUE = 92
    MEDIUMSPRINGGREEN = 93
    MEDIUMTURQUOISE = 94
    MEDIUMVIOLETRED = 95
    MIDNIGHTBLUE = 96
    MINTCREAM = 97
    MISTYROSE = 98
    MOCCASIN = 99
    NAVAJOWHITE = 100
    NAVY = 101
    OLDLACE = 102
    OLIVE = 103
    OLIVEDRAB = 104
    ORANGE = 105
    ORANGERED = 106
    ORCHID = 107
    PALEGOLDENROD = 108
    PALEGREEN = 109
    PALEVIOLETRED = 110
    PAPAYAWHIP = 111
    PEACHPUFF = 112
    PERU = 113
    PINK = 114
    PLUM = 115
    POWDERBLUE = 116
    PURPLE = 117
    RED = 118
    ROSYBROWN = 119
    ROYALBLUE = 120
    SADDLEBROWN = 121
    SALMON = 122
    SANDYBROWN = 123
    SEAGREEN = 124
    SEASHELL = 125
    SIENNA = 126
    SILVER = 127
    SKYBLUE = 128
    SLATEBLUE = 129
    SLATEGRAY = 130
    SLATEGREY = 131
    SNOW = 132
    SPRINGGREEN = 133
    STEELBLUE = 134
    TAN = 135
    TEAL = 136
    THISTLE = 137
    TOMATO = 138
    TURQUOISE = 139
    VIOLET = 140
    WHEAT = 141
    WHITE = 142
    WHITESMOKE = 143
    YELLOW = 144
    YELLOWGREEN = 145