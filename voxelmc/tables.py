"""Static marching-cubes reference data.

Cube geometry
-------------
Corners are numbered bottom face first (``z = 0``) counter-clockwise seen
from above, then the top face (``z = 1``) in the same order::

        7 ------- 6
       /|        /|
      4 ------- 5 |
      | 3 ------|-2
      |/        |/
      0 ------- 1

Edges 0-3 run around the bottom face, 4-7 around the top face and 8-11 are
the vertical edges joining corner *i* to corner *i + 4*.

Triangulation
-------------
:data:`TRIANGLE_TABLE` maps each 8-bit cube configuration (bit *i* set when
corner *i* lies above the surface level) to a flat tuple of edge indices,
consumed three at a time as triangle winding order.  Do not edit it.

The table resolves every configuration on its own, without looking at the
neighbouring cells.  Faces shared by two ambiguous cells (two diagonal
corners inside, two outside) can be split differently on each side, so
meshes of noisy fields may contain cracks there.  Smooth fields such as a
sampled sphere come out closed.
"""

from __future__ import annotations

from typing import Tuple

__all__ = [
    "CUBE_CORNERS",
    "CUBE_EDGES",
    "TRIANGLE_TABLE",
    "MAX_TRIANGLES_PER_CELL",
    "triangulation",
]

# ---------------------------------------------------------------------------
# Cube geometry
# ---------------------------------------------------------------------------

CUBE_CORNERS: Tuple[Tuple[int, int, int], ...] = (
    (0, 0, 0),
    (1, 0, 0),
    (1, 1, 0),
    (0, 1, 0),  # bottom face
    (0, 0, 1),
    (1, 0, 1),
    (1, 1, 1),
    (0, 1, 1),  # top face
)

CUBE_EDGES: Tuple[Tuple[int, int], ...] = (
    (0, 1),
    (1, 2),
    (2, 3),
    (3, 0),  # bottom face
    (4, 5),
    (5, 6),
    (6, 7),
    (7, 4),  # top face
    (0, 4),
    (1, 5),
    (2, 6),
    (3, 7),  # vertical
)

# ---------------------------------------------------------------------------
# Triangulation table (256 configurations)
# ---------------------------------------------------------------------------

TRIANGLE_TABLE: Tuple[Tuple[int, ...], ...] = (
    (),  # 0
    (0, 3, 8),  # 1
    (0, 9, 1),  # 2
    (3, 8, 1, 1, 8, 9),  # 3
    (1, 10, 2),  # 4
    (0, 3, 8, 2, 1, 10),  # 5
    (10, 2, 9, 9, 2, 0),  # 6
    (8, 2, 3, 8, 10, 2, 8, 9, 10),  # 7
    (2, 11, 3),  # 8
    (8, 0, 11, 11, 0, 2),  # 9
    (3, 2, 11, 1, 0, 9),  # 10
    (11, 1, 2, 11, 9, 1, 11, 8, 9),  # 11
    (11, 3, 10, 10, 3, 1),  # 12
    (10, 0, 1, 10, 8, 0, 10, 11, 8),  # 13
    (9, 3, 0, 9, 11, 3, 9, 10, 11),  # 14
    (8, 9, 11, 11, 9, 10),  # 15
    (4, 8, 7),  # 16
    (7, 4, 3, 3, 4, 0),  # 17
    (4, 8, 7, 0, 9, 1),  # 18
    (1, 4, 9, 1, 7, 4, 1, 3, 7),  # 19
    (4, 8, 7, 2, 1, 10),  # 20
    (7, 4, 3, 3, 4, 0, 10, 2, 1),  # 21
    (10, 2, 9, 9, 2, 0, 7, 4, 8),  # 22
    (10, 2, 3, 10, 3, 4, 3, 7, 4, 9, 10, 4),  # 23
    (8, 7, 4, 11, 3, 2),  # 24
    (4, 11, 7, 4, 2, 11, 4, 0, 2),  # 25
    (0, 9, 1, 8, 7, 4, 11, 3, 2),  # 26
    (7, 4, 11, 11, 4, 2, 2, 4, 9, 2, 9, 1),  # 27
    (1, 10, 3, 3, 10, 11, 4, 8, 7),  # 28
    (10, 11, 1, 11, 7, 4, 1, 11, 4, 1, 4, 0),  # 29
    (7, 4, 8, 9, 3, 0, 9, 11, 3, 9, 10, 11),  # 30
    (7, 4, 11, 4, 9, 11, 9, 10, 11),  # 31
    (9, 4, 5),  # 32
    (9, 4, 5, 8, 0, 3),  # 33
    (4, 5, 0, 0, 5, 1),  # 34
    (5, 8, 4, 5, 3, 8, 5, 1, 3),  # 35
    (1, 10, 2, 5, 9, 4),  # 36
    (9, 4, 5, 0, 3, 8, 2, 1, 10),  # 37
    (2, 5, 10, 2, 4, 5, 2, 0, 4),  # 38
    (10, 2, 5, 5, 2, 4, 4, 2, 3, 4, 3, 8),  # 39
    (9, 4, 5, 11, 3, 2),  # 40
    (2, 11, 0, 0, 11, 8, 5, 9, 4),  # 41
    (4, 5, 0, 0, 5, 1, 11, 3, 2),  # 42
    (5, 1, 4, 1, 2, 11, 4, 1, 11, 4, 11, 8),  # 43
    (11, 3, 10, 10, 3, 1, 4, 5, 9),  # 44
    (4, 5, 9, 10, 0, 1, 10, 8, 0, 10, 11, 8),  # 45
    (11, 3, 0, 11, 0, 5, 0, 4, 5, 10, 11, 5),  # 46
    (4, 5, 8, 5, 10, 8, 10, 11, 8),  # 47
    (8, 7, 9, 9, 7, 5),  # 48
    (3, 9, 0, 3, 5, 9, 3, 7, 5),  # 49
    (7, 0, 8, 7, 1, 0, 7, 5, 1),  # 50
    (7, 5, 3, 3, 5, 1),  # 51
    (8, 7, 9, 9, 7, 5, 2, 1, 10),  # 52
    (10, 2, 1, 3, 9, 0, 3, 5, 9, 3, 7, 5),  # 53
    (7, 5, 8, 5, 10, 2, 8, 5, 2, 8, 2, 0),  # 54
    (10, 2, 5, 2, 3, 5, 3, 7, 5),  # 55
    (5, 9, 7, 7, 9, 8, 2, 11, 3),  # 56
    (2, 11, 7, 2, 7, 9, 7, 5, 9, 0, 2, 9),  # 57
    (2, 11, 3, 7, 0, 8, 7, 1, 0, 7, 5, 1),  # 58
    (2, 11, 1, 11, 7, 1, 7, 5, 1),  # 59
    (8, 7, 5, 8, 5, 9, 11, 3, 10, 3, 1, 10),  # 60
    (5, 11, 7, 10, 11, 5, 1, 9, 0),  # 61
    (11, 5, 10, 7, 5, 11, 8, 3, 0),  # 62
    (5, 11, 7, 10, 11, 5),  # 63
    (10, 5, 6),  # 64
    (0, 3, 8, 6, 10, 5),  # 65
    (10, 5, 6, 9, 1, 0),  # 66
    (3, 8, 1, 1, 8, 9, 6, 10, 5),  # 67
    (5, 6, 1, 1, 6, 2),  # 68
    (5, 6, 1, 1, 6, 2, 8, 0, 3),  # 69
    (6, 9, 5, 6, 0, 9, 6, 2, 0),  # 70
    (6, 2, 5, 2, 3, 8, 5, 2, 8, 5, 8, 9),  # 71
    (2, 11, 3, 6, 10, 5),  # 72
    (8, 0, 11, 11, 0, 2, 5, 6, 10),  # 73
    (1, 0, 9, 2, 11, 3, 6, 10, 5),  # 74
    (5, 6, 10, 11, 1, 2, 11, 9, 1, 11, 8, 9),  # 75
    (3, 6, 11, 3, 5, 6, 3, 1, 5),  # 76
    (8, 0, 1, 8, 1, 6, 1, 5, 6, 11, 8, 6),  # 77
    (11, 3, 6, 6, 3, 5, 5, 3, 0, 5, 0, 9),  # 78
    (5, 6, 9, 6, 11, 9, 11, 8, 9),  # 79
    (5, 6, 10, 7, 4, 8),  # 80
    (0, 3, 4, 4, 3, 7, 10, 5, 6),  # 81
    (5, 6, 10, 4, 8, 7, 0, 9, 1),  # 82
    (6, 10, 5, 1, 4, 9, 1, 7, 4, 1, 3, 7),  # 83
    (2, 1, 6, 6, 1, 5, 8, 7, 4),  # 84
    (0, 3, 7, 0, 7, 4, 2, 1, 6, 1, 5, 6),  # 85
    (8, 7, 4, 6, 9, 5, 6, 0, 9, 6, 2, 0),  # 86
    (7, 2, 3, 6, 2, 7, 5, 4, 9),  # 87
    (7, 4, 8, 6, 10, 5, 2, 11, 3),  # 88
    (10, 5, 6, 4, 11, 7, 4, 2, 11, 4, 0, 2),  # 89
    (4, 8, 7, 6, 10, 5, 3, 2, 11, 1, 0, 9),  # 90
    (1, 2, 10, 11, 7, 6, 9, 5, 4),  # 91
    (4, 8, 7, 3, 6, 11, 3, 5, 6, 3, 1, 5),  # 92
    (5, 0, 1, 4, 0, 5, 7, 6, 11),  # 93
    (9, 5, 4, 6, 11, 7, 0, 8, 3),  # 94
    (11, 7, 6, 9, 5, 4),  # 95
    (6, 10, 4, 4, 10, 9),  # 96
    (6, 10, 4, 4, 10, 9, 3, 8, 0),  # 97
    (0, 10, 1, 0, 6, 10, 0, 4, 6),  # 98
    (6, 10, 1, 6, 1, 8, 1, 3, 8, 4, 6, 8),  # 99
    (4, 1, 9, 4, 2, 1, 4, 6, 2),  # 100
    (3, 8, 0, 4, 1, 9, 4, 2, 1, 4, 6, 2),  # 101
    (6, 2, 4, 4, 2, 0),  # 102
    (3, 8, 2, 8, 4, 2, 4, 6, 2),  # 103
    (9, 4, 10, 10, 4, 6, 3, 2, 11),  # 104
    (2, 11, 8, 2, 8, 0, 6, 10, 4, 10, 9, 4),  # 105
    (11, 3, 2, 0, 10, 1, 0, 6, 10, 0, 4, 6),  # 106
    (6, 8, 4, 11, 8, 6, 2, 10, 1),  # 107
    (4, 6, 9, 6, 11, 3, 9, 6, 3, 9, 3, 1),  # 108
    (8, 6, 11, 4, 6, 8, 9, 0, 1),  # 109
    (11, 3, 6, 3, 0, 6, 0, 4, 6),  # 110
    (8, 6, 11, 4, 6, 8),  # 111
    (10, 7, 6, 10, 8, 7, 10, 9, 8),  # 112
    (3, 7, 0, 7, 6, 10, 0, 7, 10, 0, 10, 9),  # 113
    (6, 10, 7, 7, 10, 8, 8, 10, 1, 8, 1, 0),  # 114
    (6, 10, 7, 10, 1, 7, 1, 3, 7),  # 115
    (2, 1, 9, 2, 9, 7, 9, 8, 7, 6, 2, 7),  # 116
    (2, 7, 6, 3, 7, 2, 0, 1, 9),  # 117
    (8, 7, 0, 7, 6, 0, 6, 2, 0),  # 118
    (7, 2, 3, 6, 2, 7),  # 119
    (3, 2, 11, 10, 7, 6, 10, 8, 7, 10, 9, 8),  # 120
    (2, 9, 0, 10, 9, 2, 6, 11, 7),  # 121
    (0, 8, 3, 7, 6, 11, 1, 2, 10),  # 122
    (7, 6, 11, 1, 2, 10),  # 123
    (8, 1, 9, 3, 1, 8, 11, 7, 6),  # 124
    (11, 7, 6, 1, 9, 0),  # 125
    (6, 11, 7, 0, 8, 3),  # 126
    (11, 7, 6),  # 127
    (6, 7, 11),  # 128
    (7, 11, 6, 3, 8, 0),  # 129
    (6, 7, 11, 0, 9, 1),  # 130
    (9, 1, 8, 8, 1, 3, 6, 7, 11),  # 131
    (11, 6, 7, 10, 2, 1),  # 132
    (3, 8, 0, 11, 6, 7, 10, 2, 1),  # 133
    (0, 9, 2, 2, 9, 10, 7, 11, 6),  # 134
    (6, 7, 11, 8, 2, 3, 8, 10, 2, 8, 9, 10),  # 135
    (3, 2, 7, 7, 2, 6),  # 136
    (0, 7, 8, 0, 6, 7, 0, 2, 6),  # 137
    (6, 7, 2, 2, 7, 3, 9, 1, 0),  # 138
    (6, 7, 8, 6, 8, 1, 8, 9, 1, 2, 6, 1),  # 139
    (7, 10, 6, 7, 1, 10, 7, 3, 1),  # 140
    (8, 0, 7, 7, 0, 6, 6, 0, 1, 6, 1, 10),  # 141
    (7, 3, 6, 3, 0, 9, 6, 3, 9, 6, 9, 10),  # 142
    (6, 7, 10, 7, 8, 10, 8, 9, 10),  # 143
    (11, 6, 8, 8, 6, 4),  # 144
    (6, 3, 11, 6, 0, 3, 6, 4, 0),  # 145
    (11, 6, 8, 8, 6, 4, 1, 0, 9),  # 146
    (1, 3, 9, 3, 11, 6, 9, 3, 6, 9, 6, 4),  # 147
    (4, 8, 6, 6, 8, 11, 1, 10, 2),  # 148
    (1, 10, 2, 6, 3, 11, 6, 0, 3, 6, 4, 0),  # 149
    (11, 6, 4, 11, 4, 8, 10, 2, 9, 2, 0, 9),  # 150
    (10, 4, 9, 6, 4, 10, 11, 2, 3),  # 151
    (2, 8, 3, 2, 4, 8, 2, 6, 4),  # 152
    (4, 0, 6, 6, 0, 2),  # 153
    (9, 1, 0, 2, 8, 3, 2, 4, 8, 2, 6, 4),  # 154
    (9, 1, 4, 1, 2, 4, 2, 6, 4),  # 155
    (4, 8, 3, 4, 3, 10, 3, 1, 10, 6, 4, 10),  # 156
    (1, 10, 0, 10, 6, 0, 6, 4, 0),  # 157
    (4, 10, 6, 9, 10, 4, 0, 8, 3),  # 158
    (4, 10, 6, 9, 10, 4),  # 159
    (6, 7, 11, 4, 5, 9),  # 160
    (4, 5, 9, 7, 11, 6, 3, 8, 0),  # 161
    (1, 0, 5, 5, 0, 4, 11, 6, 7),  # 162
    (11, 6, 7, 5, 8, 4, 5, 3, 8, 5, 1, 3),  # 163
    (10, 2, 1, 6, 7, 11, 4, 5, 9),  # 164
    (0, 3, 8, 4, 5, 9, 11, 6, 7, 10, 2, 1),  # 165
    (7, 11, 6, 2, 5, 10, 2, 4, 5, 2, 0, 4),  # 166
    (8, 4, 7, 5, 10, 6, 3, 11, 2),  # 167
    (3, 2, 7, 7, 2, 6, 9, 4, 5),  # 168
    (5, 9, 4, 0, 7, 8, 0, 6, 7, 0, 2, 6),  # 169
    (3, 2, 6, 3, 6, 7, 1, 0, 5, 0, 4, 5),  # 170
    (6, 1, 2, 5, 1, 6, 4, 7, 8),  # 171
    (9, 4, 5, 7, 10, 6, 7, 1, 10, 7, 3, 1),  # 172
    (10, 6, 5, 7, 8, 4, 1, 9, 0),  # 173
    (4, 3, 0, 7, 3, 4, 6, 5, 10),  # 174
    (10, 6, 5, 8, 4, 7),  # 175
    (9, 6, 5, 9, 11, 6, 9, 8, 11),  # 176
    (11, 6, 3, 3, 6, 0, 0, 6, 5, 0, 5, 9),  # 177
    (11, 6, 5, 11, 5, 0, 5, 1, 0, 8, 11, 0),  # 178
    (11, 6, 3, 6, 5, 3, 5, 1, 3),  # 179
    (2, 1, 10, 9, 6, 5, 9, 11, 6, 9, 8, 11),  # 180
    (9, 0, 1, 3, 11, 2, 5, 10, 6),  # 181
    (11, 0, 8, 2, 0, 11, 10, 6, 5),  # 182
    (3, 11, 2, 5, 10, 6),  # 183
    (9, 8, 5, 8, 3, 2, 5, 8, 2, 5, 2, 6),  # 184
    (5, 9, 6, 9, 0, 6, 0, 2, 6),  # 185
    (1, 6, 5, 2, 6, 1, 3, 0, 8),  # 186
    (1, 6, 5, 2, 6, 1),  # 187
    (1, 8, 3, 9, 8, 1, 5, 10, 6),  # 188
    (6, 5, 10, 0, 1, 9),  # 189
    (8, 3, 0, 5, 10, 6),  # 190
    (6, 5, 10),  # 191
    (7, 11, 5, 5, 11, 10),  # 192
    (10, 5, 11, 11, 5, 7, 0, 3, 8),  # 193
    (7, 11, 5, 5, 11, 10, 0, 9, 1),  # 194
    (7, 11, 10, 7, 10, 5, 3, 8, 1, 8, 9, 1),  # 195
    (1, 11, 2, 1, 7, 11, 1, 5, 7),  # 196
    (8, 0, 3, 1, 11, 2, 1, 7, 11, 1, 5, 7),  # 197
    (7, 11, 2, 7, 2, 9, 2, 0, 9, 5, 7, 9),  # 198
    (7, 9, 5, 8, 9, 7, 3, 11, 2),  # 199
    (5, 2, 10, 5, 3, 2, 5, 7, 3),  # 200
    (5, 7, 10, 7, 8, 0, 10, 7, 0, 10, 0, 2),  # 201
    (0, 9, 1, 5, 2, 10, 5, 3, 2, 5, 7, 3),  # 202
    (9, 7, 8, 5, 7, 9, 10, 1, 2),  # 203
    (3, 1, 7, 7, 1, 5),  # 204
    (8, 0, 7, 0, 1, 7, 1, 5, 7),  # 205
    (0, 9, 3, 9, 5, 3, 5, 7, 3),  # 206
    (9, 7, 8, 5, 7, 9),  # 207
    (8, 5, 4, 8, 10, 5, 8, 11, 10),  # 208
    (0, 3, 11, 0, 11, 5, 11, 10, 5, 4, 0, 5),  # 209
    (1, 0, 9, 8, 5, 4, 8, 10, 5, 8, 11, 10),  # 210
    (10, 3, 11, 1, 3, 10, 9, 5, 4),  # 211
    (8, 11, 4, 11, 2, 1, 4, 11, 1, 4, 1, 5),  # 212
    (0, 5, 4, 1, 5, 0, 2, 3, 11),  # 213
    (0, 11, 2, 8, 11, 0, 4, 9, 5),  # 214
    (5, 4, 9, 2, 3, 11),  # 215
    (3, 2, 8, 8, 2, 4, 4, 2, 10, 4, 10, 5),  # 216
    (10, 5, 2, 5, 4, 2, 4, 0, 2),  # 217
    (5, 4, 9, 8, 3, 0, 10, 1, 2),  # 218
    (2, 10, 1, 4, 9, 5),  # 219
    (4, 8, 5, 8, 3, 5, 3, 1, 5),  # 220
    (0, 5, 4, 1, 5, 0),  # 221
    (5, 4, 9, 3, 0, 8),  # 222
    (5, 4, 9),  # 223
    (11, 4, 7, 11, 9, 4, 11, 10, 9),  # 224
    (0, 3, 8, 11, 4, 7, 11, 9, 4, 11, 10, 9),  # 225
    (11, 10, 7, 10, 1, 0, 7, 10, 0, 7, 0, 4),  # 226
    (3, 10, 1, 11, 10, 3, 7, 8, 4),  # 227
    (7, 11, 4, 4, 11, 9, 9, 11, 2, 9, 2, 1),  # 228
    (1, 9, 0, 4, 7, 8, 2, 3, 11),  # 229
    (7, 11, 4, 11, 2, 4, 2, 0, 4),  # 230
    (4, 7, 8, 2, 3, 11),  # 231
    (3, 2, 10, 3, 10, 4, 10, 9, 4, 7, 3, 4),  # 232
    (9, 2, 10, 0, 2, 9, 8, 4, 7),  # 233
    (3, 4, 7, 0, 4, 3, 1, 2, 10),  # 234
    (7, 8, 4, 10, 1, 2),  # 235
    (9, 4, 1, 4, 7, 1, 7, 3, 1),  # 236
    (7, 8, 4, 1, 9, 0),  # 237
    (3, 4, 7, 0, 4, 3),  # 238
    (7, 8, 4),  # 239
    (11, 10, 8, 8, 10, 9),  # 240
    (0, 3, 9, 3, 11, 9, 11, 10, 9),  # 241
    (1, 0, 10, 0, 8, 10, 8, 11, 10),  # 242
    (10, 3, 11, 1, 3, 10),  # 243
    (2, 1, 11, 1, 9, 11, 9, 8, 11),  # 244
    (11, 2, 3, 9, 0, 1),  # 245
    (11, 0, 8, 2, 0, 11),  # 246
    (3, 11, 2),  # 247
    (3, 2, 8, 2, 10, 8, 10, 9, 8),  # 248
    (9, 2, 10, 0, 2, 9),  # 249
    (8, 3, 0, 10, 1, 2),  # 250
    (2, 10, 1),  # 251
    (1, 8, 3, 9, 8, 1),  # 252
    (1, 9, 0),  # 253
    (8, 3, 0),  # 254
    (),  # 255
)

MAX_TRIANGLES_PER_CELL: int = max(len(entry) for entry in TRIANGLE_TABLE) // 3

_EMPTY: Tuple[int, ...] = ()


def triangulation(config: int) -> Tuple[int, ...]:
    """Return the edge-index triangle list for cube configuration *config*.

    Configurations outside ``[0, 256)`` have no triangles.
    """
    if 0 <= config < len(TRIANGLE_TABLE):
        return TRIANGLE_TABLE[config]
    return _EMPTY
