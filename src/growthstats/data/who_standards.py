"""
WHO growth reference LMS parameters.

0-60 months: WHO Child Growth Standards (2006), monthly to 12 months and
quarterly thereafter. Length is used up to 24 months, standing height after.
61-216 months: the 61-month rows are the published WHO Growth Reference for
school-aged children (2007). The yearly rows from 72 months are rounded
approximations of the WHO 2007 medians with smoothed L and S, not published
values. WHO 2007 weight-for-age stops at 120 months, so the weight rows from
132 to 216 months are approximate extensions that keep the weight table
spanning 0-216 months like height. Scores in that range are indicative only.

The two studies do not join smoothly at 60/61 months; the boundary rows are
kept as published.

Format: age_months -> (L, M, S)
"""

from typing import Dict, Tuple

from ..models import LMSRecord

LMSRows = Dict[float, Tuple[float, float, float]]

# Weight-for-age (kg)
WEIGHT_BOYS_0_60: LMSRows = {
    0: (0.3487, 3.3464, 0.14602),
    1: (0.2297, 4.4709, 0.13395),
    2: (0.1970, 5.5675, 0.12385),
    3: (0.1738, 6.3762, 0.11727),
    4: (0.1553, 7.0023, 0.11316),
    5: (0.1395, 7.5105, 0.11080),
    6: (0.1257, 7.9340, 0.10958),
    7: (0.1134, 8.2970, 0.10902),
    8: (0.1021, 8.6151, 0.10882),
    9: (0.0917, 8.9014, 0.10881),
    10: (0.0820, 9.1649, 0.10891),
    11: (0.0730, 9.4122, 0.10906),
    12: (0.0644, 9.6479, 0.10925),
    15: (0.0409, 10.3108, 0.10999),
    18: (0.0191, 10.9385, 0.11097),
    21: (-0.0003, 11.5486, 0.11232),
    24: (-0.0137, 12.1515, 0.11426),
    27: (-0.0271, 12.7375, 0.11634),
    30: (-0.0394, 13.3046, 0.11816),
    33: (-0.0507, 13.8468, 0.11978),
    36: (-0.0611, 14.3429, 0.12122),
    39: (-0.0785, 14.8409, 0.12247),
    42: (-0.0875, 15.3345, 0.12352),
    45: (-0.0954, 15.8408, 0.12431),
    48: (-0.1030, 16.3489, 0.12486),
    51: (-0.1107, 16.8487, 0.12554),
    54: (-0.1195, 17.3417, 0.12652),
    57: (-0.1303, 17.8379, 0.12780),
    60: (-0.1419, 18.3366, 0.12930),
}

WEIGHT_GIRLS_0_60: LMSRows = {
    0: (0.3809, 3.2322, 0.14171),
    1: (0.1714, 4.1873, 0.13724),
    2: (0.0962, 5.1282, 0.13000),
    3: (0.0402, 5.8458, 0.12619),
    4: (-0.0050, 6.4237, 0.12402),
    5: (-0.0430, 6.8985, 0.12274),
    6: (-0.0756, 7.2970, 0.12204),
    7: (-0.1039, 7.6422, 0.12178),
    8: (-0.1288, 7.9487, 0.12181),
    9: (-0.1507, 8.2254, 0.12199),
    10: (-0.1700, 8.4800, 0.12223),
    11: (-0.1872, 8.7192, 0.12247),
    12: (-0.2024, 8.9481, 0.12268),
    15: (-0.2385, 9.6008, 0.12315),
    18: (-0.2631, 10.2315, 0.12389),
    21: (-0.2806, 10.8566, 0.12513),
    24: (-0.2941, 11.4775, 0.12669),
    27: (-0.3052, 12.0851, 0.12838),
    30: (-0.3144, 12.6685, 0.13004),
    33: (-0.3221, 13.2347, 0.13163),
    36: (-0.3285, 13.8503, 0.13317),
    39: (-0.3341, 14.3926, 0.13460),
    42: (-0.3389, 14.9278, 0.13594),
    45: (-0.3430, 15.4573, 0.13720),
    48: (-0.3466, 15.9860, 0.13840),
    51: (-0.3497, 16.5095, 0.13955),
    54: (-0.3524, 17.0296, 0.14066),
    57: (-0.3548, 17.5459, 0.14174),
    60: (-0.3569, 18.0577, 0.14280),
}

WEIGHT_BOYS_5_18: LMSRows = {
    61: (-0.2026, 18.5057, 0.12988),
    72: (-0.3990, 20.5000, 0.13593),
    84: (-0.5920, 22.9000, 0.14424),
    96: (-0.7490, 25.4000, 0.15392),
    108: (-0.8500, 28.1000, 0.16387),
    120: (-0.9000, 31.2000, 0.17265),
    132: (-0.8800, 35.0000, 0.17900),
    144: (-0.8300, 39.6000, 0.18200),
    156: (-0.7600, 45.2000, 0.18100),
    168: (-0.6800, 50.8000, 0.17600),
    180: (-0.6000, 56.0000, 0.16900),
    192: (-0.5200, 60.8000, 0.16200),
    204: (-0.4500, 64.4000, 0.15600),
    216: (-0.3900, 67.2000, 0.15100),
}

WEIGHT_GIRLS_5_18: LMSRows = {
    61: (-0.4681, 18.2579, 0.14295),
    72: (-0.6500, 20.2000, 0.15000),
    84: (-0.8200, 22.4000, 0.15900),
    96: (-0.9500, 25.0000, 0.16900),
    108: (-1.0200, 28.2000, 0.17800),
    120: (-1.0300, 31.9000, 0.18500),
    132: (-0.9800, 36.0000, 0.18800),
    144: (-0.9000, 40.5000, 0.18700),
    156: (-0.8000, 44.6000, 0.18200),
    168: (-0.7100, 47.8000, 0.17500),
    180: (-0.6300, 50.4000, 0.16800),
    192: (-0.5600, 52.0000, 0.16200),
    204: (-0.5000, 53.2000, 0.15700),
    216: (-0.4500, 54.0000, 0.15300),
}

# Length/height-for-age (cm)
HEIGHT_BOYS_0_60: LMSRows = {
    0: (1.0, 49.8842, 0.03795),
    1: (1.0, 54.7244, 0.03557),
    2: (1.0, 58.4249, 0.03424),
    3: (1.0, 61.4292, 0.03328),
    4: (1.0, 63.8860, 0.03257),
    5: (1.0, 65.9026, 0.03204),
    6: (1.0, 67.6236, 0.03165),
    7: (1.0, 69.1645, 0.03139),
    8: (1.0, 70.5994, 0.03124),
    9: (1.0, 71.9687, 0.03117),
    10: (1.0, 73.2812, 0.03118),
    11: (1.0, 74.5388, 0.03125),
    12: (1.0, 75.7488, 0.03137),
    15: (1.0, 79.1458, 0.03184),
    18: (1.0, 82.2587, 0.03240),
    21: (1.0, 85.1348, 0.03297),
    24: (1.0, 87.1161, 0.03507),
    27: (1.0, 89.6540, 0.03560),
    30: (1.0, 92.0720, 0.03609),
    33: (1.0, 94.1360, 0.03652),
    36: (1.0, 96.0845, 0.03690),
    39: (1.0, 98.0170, 0.03725),
    42: (1.0, 99.8850, 0.03757),
    45: (1.0, 101.6960, 0.03786),
    48: (1.0, 103.3273, 0.03813),
    51: (1.0, 104.9960, 0.03838),
    54: (1.0, 106.6550, 0.03861),
    57: (1.0, 108.3030, 0.03883),
    60: (1.0, 109.9638, 0.03903),
}

HEIGHT_GIRLS_0_60: LMSRows = {
    0: (1.0, 49.1477, 0.03790),
    1: (1.0, 53.6872, 0.03640),
    2: (1.0, 57.0673, 0.03568),
    3: (1.0, 59.8029, 0.03520),
    4: (1.0, 62.0899, 0.03486),
    5: (1.0, 64.0301, 0.03463),
    6: (1.0, 65.7311, 0.03448),
    7: (1.0, 67.2873, 0.03441),
    8: (1.0, 68.7498, 0.03440),
    9: (1.0, 70.1435, 0.03444),
    10: (1.0, 71.4818, 0.03452),
    11: (1.0, 72.7710, 0.03464),
    12: (1.0, 74.0150, 0.03479),
    15: (1.0, 77.5099, 0.03534),
    18: (1.0, 80.7079, 0.03598),
    21: (1.0, 83.6654, 0.03665),
    24: (1.0, 85.7153, 0.03764),
    27: (1.0, 88.3280, 0.03815),
    30: (1.0, 90.7000, 0.03859),
    33: (1.0, 92.9000, 0.03897),
    36: (1.0, 95.0515, 0.03930),
    39: (1.0, 97.0770, 0.03961),
    42: (1.0, 99.0040, 0.03988),
    45: (1.0, 100.8560, 0.04014),
    48: (1.0, 102.7312, 0.04038),
    51: (1.0, 104.4910, 0.04060),
    54: (1.0, 106.2160, 0.04080),
    57: (1.0, 107.9130, 0.04099),
    60: (1.0, 109.4233, 0.04117),
}

HEIGHT_BOYS_5_18: LMSRows = {
    61: (1.0, 110.2647, 0.04164),
    72: (1.0, 116.0000, 0.04180),
    84: (1.0, 121.7000, 0.04230),
    96: (1.0, 127.3000, 0.04290),
    108: (1.0, 132.6000, 0.04350),
    120: (1.0, 137.8000, 0.04420),
    132: (1.0, 143.1000, 0.04520),
    144: (1.0, 149.1000, 0.04640),
    156: (1.0, 156.0000, 0.04700),
    168: (1.0, 163.2000, 0.04600),
    180: (1.0, 169.0000, 0.04380),
    192: (1.0, 172.9000, 0.04170),
    204: (1.0, 175.2000, 0.04040),
    216: (1.0, 176.1000, 0.03980),
}

HEIGHT_GIRLS_5_18: LMSRows = {
    61: (1.0, 109.6016, 0.04355),
    72: (1.0, 115.1000, 0.04400),
    84: (1.0, 120.8000, 0.04460),
    96: (1.0, 126.6000, 0.04530),
    108: (1.0, 132.5000, 0.04600),
    120: (1.0, 138.6000, 0.04640),
    132: (1.0, 144.9000, 0.04600),
    144: (1.0, 151.2000, 0.04470),
    156: (1.0, 156.4000, 0.04250),
    168: (1.0, 159.8000, 0.04070),
    180: (1.0, 161.7000, 0.03970),
    192: (1.0, 162.5000, 0.03930),
    204: (1.0, 162.9000, 0.03920),
    216: (1.0, 163.1000, 0.03920),
}

# Head circumference-for-age (cm); no school-age reference exists
HEAD_CIRC_BOYS_0_60: LMSRows = {
    0: (1.0, 34.4618, 0.03686),
    1: (1.0, 37.2759, 0.03133),
    2: (1.0, 39.1285, 0.02997),
    3: (1.0, 40.5135, 0.02918),
    4: (1.0, 41.6317, 0.02868),
    5: (1.0, 42.5576, 0.02837),
    6: (1.0, 43.3306, 0.02817),
    7: (1.0, 43.9803, 0.02804),
    8: (1.0, 44.5300, 0.02796),
    9: (1.0, 44.9998, 0.02792),
    10: (1.0, 45.4051, 0.02790),
    11: (1.0, 45.7573, 0.02789),
    12: (1.0, 46.0661, 0.02789),
    15: (1.0, 46.7912, 0.02793),
    18: (1.0, 47.3710, 0.02800),
    21: (1.0, 47.8412, 0.02808),
    24: (1.0, 48.2493, 0.02817),
    27: (1.0, 48.5969, 0.02826),
    30: (1.0, 48.8975, 0.02835),
    33: (1.0, 49.1607, 0.02843),
    36: (1.0, 49.3939, 0.02851),
    39: (1.0, 49.6047, 0.02858),
    42: (1.0, 49.7962, 0.02864),
    45: (1.0, 49.9715, 0.02870),
    48: (1.0, 50.1330, 0.02876),
    51: (1.0, 50.2826, 0.02881),
    54: (1.0, 50.4217, 0.02886),
    57: (1.0, 50.5518, 0.02891),
    60: (1.0, 50.6741, 0.02895),
}

HEAD_CIRC_GIRLS_0_60: LMSRows = {
    0: (1.0, 33.8787, 0.03496),
    1: (1.0, 36.5463, 0.03210),
    2: (1.0, 38.2521, 0.03168),
    3: (1.0, 39.5328, 0.03140),
    4: (1.0, 40.5817, 0.03119),
    5: (1.0, 41.4590, 0.03102),
    6: (1.0, 42.1995, 0.03087),
    7: (1.0, 42.8290, 0.03075),
    8: (1.0, 43.3671, 0.03063),
    9: (1.0, 43.8300, 0.03053),
    10: (1.0, 44.2319, 0.03044),
    11: (1.0, 44.5844, 0.03035),
    12: (1.0, 44.8965, 0.03027),
    15: (1.0, 45.6447, 0.03008),
    18: (1.0, 46.2267, 0.02993),
    21: (1.0, 46.7034, 0.02982),
    24: (1.0, 47.1019, 0.02974),
    27: (1.0, 47.4409, 0.02968),
    30: (1.0, 47.7380, 0.02963),
    33: (1.0, 48.0031, 0.02960),
    36: (1.0, 48.2424, 0.02958),
    39: (1.0, 48.4589, 0.02957),
    42: (1.0, 48.6569, 0.02957),
    45: (1.0, 48.8398, 0.02958),
    48: (1.0, 49.0102, 0.02960),
    51: (1.0, 49.1708, 0.02963),
    54: (1.0, 49.3235, 0.02966),
    57: (1.0, 49.4694, 0.02970),
    60: (1.0, 49.6081, 0.02974),
}


def to_records(rows: LMSRows) -> Tuple[LMSRecord, ...]:
    """Convert an age -> (L, M, S) mapping into an age-ordered record tuple."""
    return tuple(
        LMSRecord(age=float(age), L=L, M=M, S=S)
        for age, (L, M, S) in sorted(rows.items())
    )


# (measurement, gender) -> sub-range tables in age order
WHO_SUBTABLES: Dict[Tuple[str, str], Tuple[Tuple[LMSRecord, ...], ...]] = {
    ("weight", "male"): (to_records(WEIGHT_BOYS_0_60), to_records(WEIGHT_BOYS_5_18)),
    ("weight", "female"): (
        to_records(WEIGHT_GIRLS_0_60),
        to_records(WEIGHT_GIRLS_5_18),
    ),
    ("height", "male"): (to_records(HEIGHT_BOYS_0_60), to_records(HEIGHT_BOYS_5_18)),
    ("height", "female"): (
        to_records(HEIGHT_GIRLS_0_60),
        to_records(HEIGHT_GIRLS_5_18),
    ),
    ("headCircumference", "male"): (to_records(HEAD_CIRC_BOYS_0_60),),
    ("headCircumference", "female"): (to_records(HEAD_CIRC_GIRLS_0_60),),
}
