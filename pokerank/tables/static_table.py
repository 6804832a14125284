"""
Precomputed lookup table for 5-card hand evaluation.

Generated by pokerank.tables.codegen from the dynamically built table; do
not edit by hand. Keys are listed in score order and each (first_score,
count) run assigns consecutive scores to the next count keys.
"""

import jax.numpy as jnp

TABLE_VERSION = 1

FLUSH_RUNS = ((1, 10), (323, 1277))
FLUSH_KEYS = jnp.array([
    7936, 3968, 1984, 992, 496, 248, 124, 62, 31, 4111,
    7808, 7744, 7712, 7696, 7688, 7684, 7682, 7681, 7552, 7488,
    7456, 7440, 7432, 7428, 7426, 7425, 7360, 7328, 7312, 7304,
    7300, 7298, 7297, 7264, 7248, 7240, 7236, 7234, 7233, 7216,
    7208, 7204, 7202, 7201, 7192, 7188, 7186, 7185, 7180, 7178,
    7177, 7174, 7173, 7171, 7040, 6976, 6944, 6928, 6920, 6916,
    6914, 6913, 6848, 6816, 6800, 6792, 6788, 6786, 6785, 6752,
    6736, 6728, 6724, 6722, 6721, 6704, 6696, 6692, 6690, 6689,
    6680, 6676, 6674, 6673, 6668, 6666, 6665, 6662, 6661, 6659,
    6592, 6560, 6544, 6536, 6532, 6530, 6529, 6496, 6480, 6472,
    6468, 6466, 6465, 6448, 6440, 6436, 6434, 6433, 6424, 6420,
    6418, 6417, 6412, 6410, 6409, 6406, 6405, 6403, 6368, 6352,
    6344, 6340, 6338, 6337, 6320, 6312, 6308, 6306, 6305, 6296,
    6292, 6290, 6289, 6284, 6282, 6281, 6278, 6277, 6275, 6256,
    6248, 6244, 6242, 6241, 6232, 6228, 6226, 6225, 6220, 6218,
    6217, 6214, 6213, 6211, 6200, 6196, 6194, 6193, 6188, 6186,
    6185, 6182, 6181, 6179, 6172, 6170, 6169, 6166, 6165, 6163,
    6158, 6157, 6155, 6151, 6016, 5952, 5920, 5904, 5896, 5892,
    5890, 5889, 5824, 5792, 5776, 5768, 5764, 5762, 5761, 5728,
    5712, 5704, 5700, 5698, 5697, 5680, 5672, 5668, 5666, 5665,
    5656, 5652, 5650, 5649, 5644, 5642, 5641, 5638, 5637, 5635,
    5568, 5536, 5520, 5512, 5508, 5506, 5505, 5472, 5456, 5448,
    5444, 5442, 5441, 5424, 5416, 5412, 5410, 5409, 5400, 5396,
    5394, 5393, 5388, 5386, 5385, 5382, 5381, 5379, 5344, 5328,
    5320, 5316, 5314, 5313, 5296, 5288, 5284, 5282, 5281, 5272,
    5268, 5266, 5265, 5260, 5258, 5257, 5254, 5253, 5251, 5232,
    5224, 5220, 5218, 5217, 5208, 5204, 5202, 5201, 5196, 5194,
    5193, 5190, 5189, 5187, 5176, 5172, 5170, 5169, 5164, 5162,
    5161, 5158, 5157, 5155, 5148, 5146, 5145, 5142, 5141, 5139,
    5134, 5133, 5131, 5127, 5056, 5024, 5008, 5000, 4996, 4994,
    4993, 4960, 4944, 4936, 4932, 4930, 4929, 4912, 4904, 4900,
    4898, 4897, 4888, 4884, 4882, 4881, 4876, 4874, 4873, 4870,
    4869, 4867, 4832, 4816, 4808, 4804, 4802, 4801, 4784, 4776,
    4772, 4770, 4769, 4760, 4756, 4754, 4753, 4748, 4746, 4745,
    4742, 4741, 4739, 4720, 4712, 4708, 4706, 4705, 4696, 4692,
    4690, 4689, 4684, 4682, 4681, 4678, 4677, 4675, 4664, 4660,
    4658, 4657, 4652, 4650, 4649, 4646, 4645, 4643, 4636, 4634,
    4633, 4630, 4629, 4627, 4622, 4621, 4619, 4615, 4576, 4560,
    4552, 4548, 4546, 4545, 4528, 4520, 4516, 4514, 4513, 4504,
    4500, 4498, 4497, 4492, 4490, 4489, 4486, 4485, 4483, 4464,
    4456, 4452, 4450, 4449, 4440, 4436, 4434, 4433, 4428, 4426,
    4425, 4422, 4421, 4419, 4408, 4404, 4402, 4401, 4396, 4394,
    4393, 4390, 4389, 4387, 4380, 4378, 4377, 4374, 4373, 4371,
    4366, 4365, 4363, 4359, 4336, 4328, 4324, 4322, 4321, 4312,
    4308, 4306, 4305, 4300, 4298, 4297, 4294, 4293, 4291, 4280,
    4276, 4274, 4273, 4268, 4266, 4265, 4262, 4261, 4259, 4252,
    4250, 4249, 4246, 4245, 4243, 4238, 4237, 4235, 4231, 4216,
    4212, 4210, 4209, 4204, 4202, 4201, 4198, 4197, 4195, 4188,
    4186, 4185, 4182, 4181, 4179, 4174, 4173, 4171, 4167, 4156,
    4154, 4153, 4150, 4149, 4147, 4142, 4141, 4139, 4135, 4126,
    4125, 4123, 4119, 3904, 3872, 3856, 3848, 3844, 3842, 3841,
    3776, 3744, 3728, 3720, 3716, 3714, 3713, 3680, 3664, 3656,
    3652, 3650, 3649, 3632, 3624, 3620, 3618, 3617, 3608, 3604,
    3602, 3601, 3596, 3594, 3593, 3590, 3589, 3587, 3520, 3488,
    3472, 3464, 3460, 3458, 3457, 3424, 3408, 3400, 3396, 3394,
    3393, 3376, 3368, 3364, 3362, 3361, 3352, 3348, 3346, 3345,
    3340, 3338, 3337, 3334, 3333, 3331, 3296, 3280, 3272, 3268,
    3266, 3265, 3248, 3240, 3236, 3234, 3233, 3224, 3220, 3218,
    3217, 3212, 3210, 3209, 3206, 3205, 3203, 3184, 3176, 3172,
    3170, 3169, 3160, 3156, 3154, 3153, 3148, 3146, 3145, 3142,
    3141, 3139, 3128, 3124, 3122, 3121, 3116, 3114, 3113, 3110,
    3109, 3107, 3100, 3098, 3097, 3094, 3093, 3091, 3086, 3085,
    3083, 3079, 3008, 2976, 2960, 2952, 2948, 2946, 2945, 2912,
    2896, 2888, 2884, 2882, 2881, 2864, 2856, 2852, 2850, 2849,
    2840, 2836, 2834, 2833, 2828, 2826, 2825, 2822, 2821, 2819,
    2784, 2768, 2760, 2756, 2754, 2753, 2736, 2728, 2724, 2722,
    2721, 2712, 2708, 2706, 2705, 2700, 2698, 2697, 2694, 2693,
    2691, 2672, 2664, 2660, 2658, 2657, 2648, 2644, 2642, 2641,
    2636, 2634, 2633, 2630, 2629, 2627, 2616, 2612, 2610, 2609,
    2604, 2602, 2601, 2598, 2597, 2595, 2588, 2586, 2585, 2582,
    2581, 2579, 2574, 2573, 2571, 2567, 2528, 2512, 2504, 2500,
    2498, 2497, 2480, 2472, 2468, 2466, 2465, 2456, 2452, 2450,
    2449, 2444, 2442, 2441, 2438, 2437, 2435, 2416, 2408, 2404,
    2402, 2401, 2392, 2388, 2386, 2385, 2380, 2378, 2377, 2374,
    2373, 2371, 2360, 2356, 2354, 2353, 2348, 2346, 2345, 2342,
    2341, 2339, 2332, 2330, 2329, 2326, 2325, 2323, 2318, 2317,
    2315, 2311, 2288, 2280, 2276, 2274, 2273, 2264, 2260, 2258,
    2257, 2252, 2250, 2249, 2246, 2245, 2243, 2232, 2228, 2226,
    2225, 2220, 2218, 2217, 2214, 2213, 2211, 2204, 2202, 2201,
    2198, 2197, 2195, 2190, 2189, 2187, 2183, 2168, 2164, 2162,
    2161, 2156, 2154, 2153, 2150, 2149, 2147, 2140, 2138, 2137,
    2134, 2133, 2131, 2126, 2125, 2123, 2119, 2108, 2106, 2105,
    2102, 2101, 2099, 2094, 2093, 2091, 2087, 2078, 2077, 2075,
    2071, 2063, 1952, 1936, 1928, 1924, 1922, 1921, 1888, 1872,
    1864, 1860, 1858, 1857, 1840, 1832, 1828, 1826, 1825, 1816,
    1812, 1810, 1809, 1804, 1802, 1801, 1798, 1797, 1795, 1760,
    1744, 1736, 1732, 1730, 1729, 1712, 1704, 1700, 1698, 1697,
    1688, 1684, 1682, 1681, 1676, 1674, 1673, 1670, 1669, 1667,
    1648, 1640, 1636, 1634, 1633, 1624, 1620, 1618, 1617, 1612,
    1610, 1609, 1606, 1605, 1603, 1592, 1588, 1586, 1585, 1580,
    1578, 1577, 1574, 1573, 1571, 1564, 1562, 1561, 1558, 1557,
    1555, 1550, 1549, 1547, 1543, 1504, 1488, 1480, 1476, 1474,
    1473, 1456, 1448, 1444, 1442, 1441, 1432, 1428, 1426, 1425,
    1420, 1418, 1417, 1414, 1413, 1411, 1392, 1384, 1380, 1378,
    1377, 1368, 1364, 1362, 1361, 1356, 1354, 1353, 1350, 1349,
    1347, 1336, 1332, 1330, 1329, 1324, 1322, 1321, 1318, 1317,
    1315, 1308, 1306, 1305, 1302, 1301, 1299, 1294, 1293, 1291,
    1287, 1264, 1256, 1252, 1250, 1249, 1240, 1236, 1234, 1233,
    1228, 1226, 1225, 1222, 1221, 1219, 1208, 1204, 1202, 1201,
    1196, 1194, 1193, 1190, 1189, 1187, 1180, 1178, 1177, 1174,
    1173, 1171, 1166, 1165, 1163, 1159, 1144, 1140, 1138, 1137,
    1132, 1130, 1129, 1126, 1125, 1123, 1116, 1114, 1113, 1110,
    1109, 1107, 1102, 1101, 1099, 1095, 1084, 1082, 1081, 1078,
    1077, 1075, 1070, 1069, 1067, 1063, 1054, 1053, 1051, 1047,
    1039, 976, 968, 964, 962, 961, 944, 936, 932, 930,
    929, 920, 916, 914, 913, 908, 906, 905, 902, 901,
    899, 880, 872, 868, 866, 865, 856, 852, 850, 849,
    844, 842, 841, 838, 837, 835, 824, 820, 818, 817,
    812, 810, 809, 806, 805, 803, 796, 794, 793, 790,
    789, 787, 782, 781, 779, 775, 752, 744, 740, 738,
    737, 728, 724, 722, 721, 716, 714, 713, 710, 709,
    707, 696, 692, 690, 689, 684, 682, 681, 678, 677,
    675, 668, 666, 665, 662, 661, 659, 654, 653, 651,
    647, 632, 628, 626, 625, 620, 618, 617, 614, 613,
    611, 604, 602, 601, 598, 597, 595, 590, 589, 587,
    583, 572, 570, 569, 566, 565, 563, 558, 557, 555,
    551, 542, 541, 539, 535, 527, 488, 484, 482, 481,
    472, 468, 466, 465, 460, 458, 457, 454, 453, 451,
    440, 436, 434, 433, 428, 426, 425, 422, 421, 419,
    412, 410, 409, 406, 405, 403, 398, 397, 395, 391,
    376, 372, 370, 369, 364, 362, 361, 358, 357, 355,
    348, 346, 345, 342, 341, 339, 334, 333, 331, 327,
    316, 314, 313, 310, 309, 307, 302, 301, 299, 295,
    286, 285, 283, 279, 271, 244, 242, 241, 236, 234,
    233, 230, 229, 227, 220, 218, 217, 214, 213, 211,
    206, 205, 203, 199, 188, 186, 185, 182, 181, 179,
    174, 173, 171, 167, 158, 157, 155, 151, 143, 122,
    121, 118, 117, 115, 110, 109, 107, 103, 94, 93,
    91, 87, 79, 61, 59, 55, 47,
], dtype=jnp.int32)

UNIQUE_RUNS = ((1600, 10), (6186, 1277))
UNIQUE_KEYS = jnp.array([
    7936, 3968, 1984, 992, 496, 248, 124, 62, 31, 4111,
    7808, 7744, 7712, 7696, 7688, 7684, 7682, 7681, 7552, 7488,
    7456, 7440, 7432, 7428, 7426, 7425, 7360, 7328, 7312, 7304,
    7300, 7298, 7297, 7264, 7248, 7240, 7236, 7234, 7233, 7216,
    7208, 7204, 7202, 7201, 7192, 7188, 7186, 7185, 7180, 7178,
    7177, 7174, 7173, 7171, 7040, 6976, 6944, 6928, 6920, 6916,
    6914, 6913, 6848, 6816, 6800, 6792, 6788, 6786, 6785, 6752,
    6736, 6728, 6724, 6722, 6721, 6704, 6696, 6692, 6690, 6689,
    6680, 6676, 6674, 6673, 6668, 6666, 6665, 6662, 6661, 6659,
    6592, 6560, 6544, 6536, 6532, 6530, 6529, 6496, 6480, 6472,
    6468, 6466, 6465, 6448, 6440, 6436, 6434, 6433, 6424, 6420,
    6418, 6417, 6412, 6410, 6409, 6406, 6405, 6403, 6368, 6352,
    6344, 6340, 6338, 6337, 6320, 6312, 6308, 6306, 6305, 6296,
    6292, 6290, 6289, 6284, 6282, 6281, 6278, 6277, 6275, 6256,
    6248, 6244, 6242, 6241, 6232, 6228, 6226, 6225, 6220, 6218,
    6217, 6214, 6213, 6211, 6200, 6196, 6194, 6193, 6188, 6186,
    6185, 6182, 6181, 6179, 6172, 6170, 6169, 6166, 6165, 6163,
    6158, 6157, 6155, 6151, 6016, 5952, 5920, 5904, 5896, 5892,
    5890, 5889, 5824, 5792, 5776, 5768, 5764, 5762, 5761, 5728,
    5712, 5704, 5700, 5698, 5697, 5680, 5672, 5668, 5666, 5665,
    5656, 5652, 5650, 5649, 5644, 5642, 5641, 5638, 5637, 5635,
    5568, 5536, 5520, 5512, 5508, 5506, 5505, 5472, 5456, 5448,
    5444, 5442, 5441, 5424, 5416, 5412, 5410, 5409, 5400, 5396,
    5394, 5393, 5388, 5386, 5385, 5382, 5381, 5379, 5344, 5328,
    5320, 5316, 5314, 5313, 5296, 5288, 5284, 5282, 5281, 5272,
    5268, 5266, 5265, 5260, 5258, 5257, 5254, 5253, 5251, 5232,
    5224, 5220, 5218, 5217, 5208, 5204, 5202, 5201, 5196, 5194,
    5193, 5190, 5189, 5187, 5176, 5172, 5170, 5169, 5164, 5162,
    5161, 5158, 5157, 5155, 5148, 5146, 5145, 5142, 5141, 5139,
    5134, 5133, 5131, 5127, 5056, 5024, 5008, 5000, 4996, 4994,
    4993, 4960, 4944, 4936, 4932, 4930, 4929, 4912, 4904, 4900,
    4898, 4897, 4888, 4884, 4882, 4881, 4876, 4874, 4873, 4870,
    4869, 4867, 4832, 4816, 4808, 4804, 4802, 4801, 4784, 4776,
    4772, 4770, 4769, 4760, 4756, 4754, 4753, 4748, 4746, 4745,
    4742, 4741, 4739, 4720, 4712, 4708, 4706, 4705, 4696, 4692,
    4690, 4689, 4684, 4682, 4681, 4678, 4677, 4675, 4664, 4660,
    4658, 4657, 4652, 4650, 4649, 4646, 4645, 4643, 4636, 4634,
    4633, 4630, 4629, 4627, 4622, 4621, 4619, 4615, 4576, 4560,
    4552, 4548, 4546, 4545, 4528, 4520, 4516, 4514, 4513, 4504,
    4500, 4498, 4497, 4492, 4490, 4489, 4486, 4485, 4483, 4464,
    4456, 4452, 4450, 4449, 4440, 4436, 4434, 4433, 4428, 4426,
    4425, 4422, 4421, 4419, 4408, 4404, 4402, 4401, 4396, 4394,
    4393, 4390, 4389, 4387, 4380, 4378, 4377, 4374, 4373, 4371,
    4366, 4365, 4363, 4359, 4336, 4328, 4324, 4322, 4321, 4312,
    4308, 4306, 4305, 4300, 4298, 4297, 4294, 4293, 4291, 4280,
    4276, 4274, 4273, 4268, 4266, 4265, 4262, 4261, 4259, 4252,
    4250, 4249, 4246, 4245, 4243, 4238, 4237, 4235, 4231, 4216,
    4212, 4210, 4209, 4204, 4202, 4201, 4198, 4197, 4195, 4188,
    4186, 4185, 4182, 4181, 4179, 4174, 4173, 4171, 4167, 4156,
    4154, 4153, 4150, 4149, 4147, 4142, 4141, 4139, 4135, 4126,
    4125, 4123, 4119, 3904, 3872, 3856, 3848, 3844, 3842, 3841,
    3776, 3744, 3728, 3720, 3716, 3714, 3713, 3680, 3664, 3656,
    3652, 3650, 3649, 3632, 3624, 3620, 3618, 3617, 3608, 3604,
    3602, 3601, 3596, 3594, 3593, 3590, 3589, 3587, 3520, 3488,
    3472, 3464, 3460, 3458, 3457, 3424, 3408, 3400, 3396, 3394,
    3393, 3376, 3368, 3364, 3362, 3361, 3352, 3348, 3346, 3345,
    3340, 3338, 3337, 3334, 3333, 3331, 3296, 3280, 3272, 3268,
    3266, 3265, 3248, 3240, 3236, 3234, 3233, 3224, 3220, 3218,
    3217, 3212, 3210, 3209, 3206, 3205, 3203, 3184, 3176, 3172,
    3170, 3169, 3160, 3156, 3154, 3153, 3148, 3146, 3145, 3142,
    3141, 3139, 3128, 3124, 3122, 3121, 3116, 3114, 3113, 3110,
    3109, 3107, 3100, 3098, 3097, 3094, 3093, 3091, 3086, 3085,
    3083, 3079, 3008, 2976, 2960, 2952, 2948, 2946, 2945, 2912,
    2896, 2888, 2884, 2882, 2881, 2864, 2856, 2852, 2850, 2849,
    2840, 2836, 2834, 2833, 2828, 2826, 2825, 2822, 2821, 2819,
    2784, 2768, 2760, 2756, 2754, 2753, 2736, 2728, 2724, 2722,
    2721, 2712, 2708, 2706, 2705, 2700, 2698, 2697, 2694, 2693,
    2691, 2672, 2664, 2660, 2658, 2657, 2648, 2644, 2642, 2641,
    2636, 2634, 2633, 2630, 2629, 2627, 2616, 2612, 2610, 2609,
    2604, 2602, 2601, 2598, 2597, 2595, 2588, 2586, 2585, 2582,
    2581, 2579, 2574, 2573, 2571, 2567, 2528, 2512, 2504, 2500,
    2498, 2497, 2480, 2472, 2468, 2466, 2465, 2456, 2452, 2450,
    2449, 2444, 2442, 2441, 2438, 2437, 2435, 2416, 2408, 2404,
    2402, 2401, 2392, 2388, 2386, 2385, 2380, 2378, 2377, 2374,
    2373, 2371, 2360, 2356, 2354, 2353, 2348, 2346, 2345, 2342,
    2341, 2339, 2332, 2330, 2329, 2326, 2325, 2323, 2318, 2317,
    2315, 2311, 2288, 2280, 2276, 2274, 2273, 2264, 2260, 2258,
    2257, 2252, 2250, 2249, 2246, 2245, 2243, 2232, 2228, 2226,
    2225, 2220, 2218, 2217, 2214, 2213, 2211, 2204, 2202, 2201,
    2198, 2197, 2195, 2190, 2189, 2187, 2183, 2168, 2164, 2162,
    2161, 2156, 2154, 2153, 2150, 2149, 2147, 2140, 2138, 2137,
    2134, 2133, 2131, 2126, 2125, 2123, 2119, 2108, 2106, 2105,
    2102, 2101, 2099, 2094, 2093, 2091, 2087, 2078, 2077, 2075,
    2071, 2063, 1952, 1936, 1928, 1924, 1922, 1921, 1888, 1872,
    1864, 1860, 1858, 1857, 1840, 1832, 1828, 1826, 1825, 1816,
    1812, 1810, 1809, 1804, 1802, 1801, 1798, 1797, 1795, 1760,
    1744, 1736, 1732, 1730, 1729, 1712, 1704, 1700, 1698, 1697,
    1688, 1684, 1682, 1681, 1676, 1674, 1673, 1670, 1669, 1667,
    1648, 1640, 1636, 1634, 1633, 1624, 1620, 1618, 1617, 1612,
    1610, 1609, 1606, 1605, 1603, 1592, 1588, 1586, 1585, 1580,
    1578, 1577, 1574, 1573, 1571, 1564, 1562, 1561, 1558, 1557,
    1555, 1550, 1549, 1547, 1543, 1504, 1488, 1480, 1476, 1474,
    1473, 1456, 1448, 1444, 1442, 1441, 1432, 1428, 1426, 1425,
    1420, 1418, 1417, 1414, 1413, 1411, 1392, 1384, 1380, 1378,
    1377, 1368, 1364, 1362, 1361, 1356, 1354, 1353, 1350, 1349,
    1347, 1336, 1332, 1330, 1329, 1324, 1322, 1321, 1318, 1317,
    1315, 1308, 1306, 1305, 1302, 1301, 1299, 1294, 1293, 1291,
    1287, 1264, 1256, 1252, 1250, 1249, 1240, 1236, 1234, 1233,
    1228, 1226, 1225, 1222, 1221, 1219, 1208, 1204, 1202, 1201,
    1196, 1194, 1193, 1190, 1189, 1187, 1180, 1178, 1177, 1174,
    1173, 1171, 1166, 1165, 1163, 1159, 1144, 1140, 1138, 1137,
    1132, 1130, 1129, 1126, 1125, 1123, 1116, 1114, 1113, 1110,
    1109, 1107, 1102, 1101, 1099, 1095, 1084, 1082, 1081, 1078,
    1077, 1075, 1070, 1069, 1067, 1063, 1054, 1053, 1051, 1047,
    1039, 976, 968, 964, 962, 961, 944, 936, 932, 930,
    929, 920, 916, 914, 913, 908, 906, 905, 902, 901,
    899, 880, 872, 868, 866, 865, 856, 852, 850, 849,
    844, 842, 841, 838, 837, 835, 824, 820, 818, 817,
    812, 810, 809, 806, 805, 803, 796, 794, 793, 790,
    789, 787, 782, 781, 779, 775, 752, 744, 740, 738,
    737, 728, 724, 722, 721, 716, 714, 713, 710, 709,
    707, 696, 692, 690, 689, 684, 682, 681, 678, 677,
    675, 668, 666, 665, 662, 661, 659, 654, 653, 651,
    647, 632, 628, 626, 625, 620, 618, 617, 614, 613,
    611, 604, 602, 601, 598, 597, 595, 590, 589, 587,
    583, 572, 570, 569, 566, 565, 563, 558, 557, 555,
    551, 542, 541, 539, 535, 527, 488, 484, 482, 481,
    472, 468, 466, 465, 460, 458, 457, 454, 453, 451,
    440, 436, 434, 433, 428, 426, 425, 422, 421, 419,
    412, 410, 409, 406, 405, 403, 398, 397, 395, 391,
    376, 372, 370, 369, 364, 362, 361, 358, 357, 355,
    348, 346, 345, 342, 341, 339, 334, 333, 331, 327,
    316, 314, 313, 310, 309, 307, 302, 301, 299, 295,
    286, 285, 283, 279, 271, 244, 242, 241, 236, 234,
    233, 230, 229, 227, 220, 218, 217, 214, 213, 211,
    206, 205, 203, 199, 188, 186, 185, 182, 181, 179,
    174, 173, 171, 167, 158, 157, 155, 151, 143, 122,
    121, 118, 117, 115, 110, 109, 107, 103, 94, 93,
    91, 87, 79, 61, 59, 55, 47,
], dtype=jnp.int32)

MULTIPLES_RUNS = ((11, 312), (1610, 4576))
MULTIPLES_KEYS = jnp.array([
    104553157, 87598591, 81947069, 64992503, 53689459, 48037937, 36734893, 31083371, 19780327, 14128805,
    8477283, 5651522, 76840601, 58098991, 54350669, 43105703, 35609059, 31860737, 24364093, 20615771,
    13119127, 9370805, 5622483, 3748322, 37864361, 34170277, 26782109, 21240983, 17546899, 15699857,
    12005773, 10158731, 6464647, 4617605, 2770563, 1847042, 28998521, 26169397, 21925711, 16267463,
    13438339, 12023777, 9194653, 7780091, 4950967, 3536405, 2121843, 1414562, 11473481, 10354117,
    8675071, 8115389, 5316979, 4757297, 3637933, 3078251, 1958887, 1399205, 839523, 559682,
    5343161, 4821877, 4039951, 3779309, 2997383, 2215457, 1694173, 1433531, 912247, 651605,
    390963, 260642, 3424361, 3090277, 2589151, 2422109, 1920983, 1586899, 1085773, 918731,
    584647, 417605, 250563, 167042, 1171001, 1056757, 885391, 828269, 656903, 542659,
    485537, 314171, 199927, 142805, 85683, 57122, 600281, 541717, 453871, 424589,
    336743, 278179, 248897, 190333, 102487, 73205, 43923, 29282, 98441, 88837,
    74431, 69629, 55223, 45619, 40817, 31213, 26411, 12005, 7203, 4802,
    25625, 23125, 19375, 18125, 14375, 11875, 10625, 8125, 6875, 4375,
    1875, 1250, 3321, 2997, 2511, 2349, 1863, 1539, 1377, 1053,
    891, 567, 405, 162, 656, 592, 496, 464, 368, 304,
    272, 208, 176, 112, 80, 48, 94352849, 66233081, 57962561, 36459209,
    24880481, 19918169, 11647649, 8339441, 3377129, 1723025, 620289, 275684, 85147693, 48677533,
    42599173, 26795437, 18285733, 14638717, 8560357, 6129013, 2481997, 1266325, 455877, 202612,
    50078671, 40783879, 25054231, 15759439, 10754551, 8609599, 5034679, 3604711, 1459759, 744775,
    268119, 119164, 40997909, 33388541, 23437829, 12901781, 8804429, 7048421, 4121741, 2951069,
    1195061, 609725, 219501, 97556, 20452727, 16656623, 11692487, 10232447, 4392287, 3516263,
    2056223, 1472207, 596183, 304175, 109503, 48668, 11529979, 9389971, 6591499, 5768419,
    3628411, 1982251, 1159171, 829939, 336091, 171475, 61731, 27436, 8258753, 6725897,
    4721393, 4131833, 2598977, 1773593, 830297, 594473, 240737, 122825, 44217, 19652,
    3693157, 3007693, 2111317, 1847677, 1162213, 793117, 634933, 265837, 107653, 54925,
    19773, 8788, 2237411, 1822139, 1279091, 1119371, 704099, 480491, 384659, 224939,
    65219, 33275, 11979, 5324, 576583, 469567, 329623, 288463, 181447, 123823,
    99127, 57967, 41503, 8575, 3087, 1372, 210125, 171125, 120125, 105125,
    66125, 45125, 36125, 21125, 15125, 6125, 1125, 500, 45387, 36963,
    25947, 22707, 14283, 9747, 7803, 4563, 3267, 1323, 675, 108,
    13448, 10952, 7688, 6728, 4232, 2888, 2312, 1352, 968, 392,
    200, 72, 79052387, 73952233, 58651771, 48451463, 43351309, 33151001, 28050847, 17850539,
    12750385, 7650231, 5100154, 61959979, 49140673, 40594469, 36321367, 27775163, 23502061, 14955857,
    10682755, 6409653, 4273102, 45970307, 37975471, 33978053, 25983217, 21985799, 13990963, 9993545,
    5996127, 3997418, 30118477, 26948111, 20607379, 17437013, 11096281, 7925915, 4755549, 3170366,
    22261483, 17023487, 14404489, 9166493, 6547495, 3928497, 2618998, 15231541, 12888227, 8201599,
    5858285, 3514971, 2343314, 9855703, 6271811, 4479865, 2687919, 1791946, 5306917, 3790655,
    2274393, 1516262, 2412235, 1447341, 964894, 1033815, 689210, 413526, 64379963, 60226417,
    47765779, 39458687, 35305141, 26998049, 22844503, 14537411, 10383865, 6230319, 4153546, 45537047,
    36115589, 29834617, 26694131, 20413159, 17272673, 10991701, 7851215, 4710729, 3140486, 33785551,
    27909803, 24971929, 19096181, 16158307, 10282559, 7344685, 4406811, 2937874, 22135361, 19805323,
    15145247, 12815209, 8155133, 5825095, 3495057, 2330038, 16360919, 12511291, 10586477, 6736849,
    4812035, 2887221, 1924814, 11194313, 9472111, 6027707, 4305505, 2583303, 1722202, 7243379,
    4609423, 3292445, 1975467, 1316978, 3900281, 2785915, 1671549, 1114366, 1772855, 1063713,
    709142, 759795, 506530, 303918, 45192947, 35421499, 28092913, 23207189, 20764327, 15878603,
    13435741, 8550017, 6107155, 3664293, 2442862, 31965743, 25352141, 20943073, 18738539, 14329471,
    12124937, 7715869, 5511335, 3306801, 2204534, 19870597, 16414841, 14686963, 11231207, 9503329,
    6047573, 4319695, 2591817, 1727878, 13018667, 11648281, 8907509, 7537123, 4796351, 3425965,
    2055579, 1370386, 9622493, 7358377, 6226319, 3962203, 2830145, 1698087, 1132058, 6583811,
    5570917, 3545129, 2532235, 1519341, 1012894, 4260113, 2710981, 1936415, 1161849, 774566,
    2293907, 1638505, 983103, 655402, 1042685, 625611, 417074, 446865, 297910, 178746,
    36998113, 30998419, 22998827, 18999031, 16999133, 12999337, 10999439, 6999643, 4999745, 2999847,
    1999898, 27974183, 20755039, 17145467, 15340681, 11731109, 9926323, 6316751, 4511965, 2707179,
    1804786, 17389357, 14365121, 12853003, 9828767, 8316649, 5292413, 3780295, 2268177, 1512118,
    10657993, 9536099, 7292311, 6170417, 3926629, 2804735, 1682841, 1121894, 7877647, 6024083,
    5097301, 3243737, 2316955, 1390173, 926782, 5389969, 4560743, 2902291, 2073065, 1243839,
    829226, 3487627, 2219399, 1585285, 951171, 634114, 1877953, 1341395, 804837, 536558,
    853615, 512169, 341446, 365835, 243890, 146334, 18457339, 15464257, 14466563, 9478093,
    8480399, 6485011, 5487317, 3491929, 2494235, 1496541, 997694, 13955549, 13055191, 8553401,
    7653043, 5852327, 4951969, 3151253, 2250895, 1350537, 900358, 10938133, 7166363, 6412009,
    4903301, 4148947, 2640239, 1885885, 1131531, 754354, 6704017, 5998331, 4586959, 3881273,
    2469901, 1764215, 1058529, 705686, 3929941, 3005249, 2542903, 1618211, 1155865, 693519,
    462346, 2688907, 2275229, 1447873, 1034195, 620517, 413678, 1739881, 1107197, 790855,
    474513, 316342, 936859, 669185, 401511, 267674, 425845, 255507, 170338, 182505,
    121670, 73002, 10405103, 8717789, 8155351, 6468037, 4780723, 3655847, 3093409, 1968533,
    1406095, 843657, 562438, 7867273, 7359707, 5837009, 4314311, 3299179, 2791613, 1776481,
    1268915, 761349, 507566, 6166241, 4890467, 3614693, 2764177, 2338919, 1488403, 1063145,
    637887, 425258, 4574953, 3381487, 2585843, 2188021, 1392377, 994555, 596733, 397822,
    2681869, 2050841, 1735327, 1104299, 788785, 473271, 315514, 1515839, 1282633, 816221,
    583015, 349809, 233206, 980837, 624169, 445835, 267501, 178334, 528143, 377245,
    226347, 150898, 240065, 144039, 96026, 102885, 68590, 41154, 7453021, 6244423,
    5841557, 4632959, 3827227, 2618629, 2215763, 1410031, 1007165, 604299, 402866, 5635211,
    5271649, 4180963, 3453839, 2363153, 1999591, 1272467, 908905, 545343, 363562, 4416787,
    3502969, 2893757, 1979939, 1675333, 1066121, 761515, 456909, 304606, 3276971, 2707063,
    1852201, 1567247, 997339, 712385, 427431, 284954, 2146981, 1468987, 1242989, 790993,
    564995, 338997, 225998, 1213511, 1026817, 653429, 466735, 280041, 186694, 702559,
    447083, 319345, 191607, 127738, 378301, 270215, 162129, 108086, 171955, 103173,
    68782, 73695, 49130, 29478, 3332849, 2792387, 2612233, 2071771, 1711463, 1531309,
    990847, 630539, 450385, 270231, 180154, 2519959, 2357381, 1869647, 1544491, 1381913,
    894179, 569023, 406445, 243867, 162578, 1975103, 1566461, 1294033, 1157819, 749177,
    476749, 340535, 204321, 136214, 1465399, 1210547, 1083121, 700843, 445991, 318565,
    191139, 127426, 960089, 859027, 555841, 353717, 252655, 151593, 101062, 709631,
    459173, 292201, 208715, 125229, 83486, 410839, 261443, 186745, 112047, 74698,
    169169, 120835, 72501, 48334, 76895, 46137, 30758, 32955, 21970, 13182,
    2019127, 1691701, 1582559, 1255133, 1036849, 927707, 709423, 381997, 272855, 163713,
    109142, 1526657, 1428163, 1132681, 935693, 837199, 640211, 344729, 246235, 147741,
    98494, 1196569, 949003, 783959, 701437, 536393, 288827, 206305, 123783, 82522,
    887777, 733381, 656183, 501787, 270193, 192995, 115797, 77198, 581647, 520421,
    397969, 214291, 153065, 91839, 61226, 429913, 328757, 177023, 126445, 75867,
    50578, 294151, 158389, 113135, 67881, 45254, 121121, 86515, 51909, 34606,
    46585, 27951, 18634, 19965, 13310, 7986, 520331, 435953, 407827, 323449,
    267197, 239071, 182819, 154693, 70315, 42189, 28126, 393421, 368039, 291893,
    241129, 215747, 164983, 139601, 63455, 38073, 25382, 308357, 244559, 202027,
    180761, 138229, 116963, 53165, 31899, 21266, 228781, 188993, 169099, 129311,
    109417, 49735, 29841, 19894, 149891, 134113, 102557, 86779, 39445, 23667,
    15778, 110789, 84721, 71687, 32585, 19551, 13034, 75803, 64141, 29155,
    17493, 11662, 49049, 22295, 13377, 8918, 18865, 11319, 7546, 5145,
    3430, 2058, 189625, 158875, 148625, 117875, 97375, 87125, 66625, 56375,
    35875, 15375, 10250, 143375, 134125, 106375, 87875, 78625, 60125, 50875,
    32375, 13875, 9250, 112375, 89125, 73625, 65875, 50375, 42625, 27125,
    11625, 7750, 83375, 68875, 61625, 47125, 39875, 25375, 10875, 7250,
    54625, 48875, 37375, 31625, 20125, 8625, 5750, 40375, 30875, 26125,
    16625, 7125, 4750, 27625, 23375, 14875, 6375, 4250, 17875, 11375,
    4875, 3250, 9625, 4125, 2750, 2625, 1750, 750, 40959, 34317,
    32103, 25461, 21033, 18819, 14391, 12177, 7749, 5535, 2214, 30969,
    28971, 22977, 18981, 16983, 12987, 10989, 6993, 4995, 1998, 24273,
    19251, 15903, 14229, 10881, 9207, 5859, 4185, 1674, 18009, 14877,
    13311, 10179, 8613, 5481, 3915, 1566, 11799, 10557, 8073, 6831,
    4347, 3105, 1242, 8721, 6669, 5643, 3591, 2565, 1026, 5967,
    5049, 3213, 2295, 918, 3861, 2457, 1755, 702, 2079, 1485,
    594, 945, 378, 270, 12136, 10168, 9512, 7544, 6232, 5576,
    4264, 3608, 2296, 1640, 984, 9176, 8584, 6808, 5624, 5032,
    3848, 3256, 2072, 1480, 888, 7192, 5704, 4712, 4216, 3224,
    2728, 1736, 1240, 744, 5336, 4408, 3944, 3016, 2552, 1624,
    1160, 696, 3496, 3128, 2392, 2024, 1288, 920, 552, 2584,
    1976, 1672, 1064, 760, 456, 1768, 1496, 952, 680, 408,
    1144, 728, 520, 312, 616, 440, 264, 280, 168, 120,
    71339959, 66737381, 52929647, 43724491, 39121913, 29916757, 25314179, 16109023, 11506445, 6903867,
    4602578, 59771317, 46847789, 37155143, 30693379, 27462497, 21000733, 17769851, 11308087, 8077205,
    4846323, 3230882, 52307677, 43825351, 32515583, 26860699, 24033257, 18378373, 15550931, 9896047,
    7068605, 4241163, 2827442, 32902213, 27566719, 25788221, 16895731, 15117233, 11560237, 9781739,
    6224743, 4446245, 2667747, 1778498, 22453117, 18812071, 17598389, 13957343, 10316297, 7888933,
    6675251, 4247887, 3034205, 1820523, 1213682, 17974933, 15060079, 14088461, 11173607, 9230371,
    6315517, 5343899, 3400663, 2429045, 1457427, 971618, 10511293, 8806759, 8238581, 6534047,
    5397691, 4829513, 3124979, 1988623, 1420445, 852267, 568178, 7525837, 6305431, 5898629,
    4678223, 3864619, 3457817, 2644213, 1423807, 1017005, 610203, 406802, 3047653, 2553439,
    2388701, 1894487, 1565011, 1400273, 1070797, 906059, 411845, 247107, 164738, 1554925,
    1302775, 1218725, 966575, 798475, 714425, 546325, 462275, 294175, 126075, 84050,
    559773, 468999, 438741, 347967, 287451, 257193, 196677, 166419, 105903, 75645,
    30258, 248788, 208444, 194996, 154652, 127756, 114308, 87412, 73964, 47068,
    33620, 20172, 53939969, 38152661, 30259007, 24996571, 22365353, 17102917, 14471699, 9209263,
    6578045, 3946827, 2631218, 47204489, 35691199, 26480567, 21875251, 19572593, 14967277, 12664619,
    8059303, 5756645, 3453987, 2302658, 29692241, 22450231, 21001829, 13759819, 12311417, 9414613,
    7966211, 5069407, 3621005, 2172603, 1448402, 20262569, 15320479, 14332061, 11366807, 8401553,
    6424717, 5436299, 3459463, 2471045, 1482627, 988418, 16221281, 12264871, 11473589, 9099743,
    7517179, 5143333, 4352051, 2769487, 1978205, 1186923, 791282, 9485801, 7172191, 6709469,
    5321303, 4395859, 3933137, 2544971, 1619527, 1156805, 694083, 462722, 6791609, 5135119,
    4803821, 3809927, 3147331, 2816033, 2153437, 1159543, 828245, 496947, 331298, 2750321,
    2079511, 1945349, 1542863, 1274539, 1140377, 872053, 737891, 335405, 201243, 134162,
    1403225, 1060975, 992525, 787175, 650275, 581825, 444925, 376475, 239575, 102675,
    68450, 505161, 381951, 357309, 283383, 234099, 209457, 160173, 135531, 86247,
    61605, 24642, 224516, 169756, 158804, 125948, 104044, 93092, 71188, 60236,
    38332, 27380, 16428, 33136241, 29903437, 18588623, 15355819, 13739417, 10506613, 8890211,
    5657407, 4041005, 2424603, 1616402, 20843129, 18809653, 14742701, 9659011, 8642273, 6608797,
    5592059, 3558583, 2541845, 1525107, 1016738, 14223761, 12836077, 10060709, 7979183, 5897657,
    4509973, 3816131, 2428447, 1734605, 1040763, 693842, 11386889, 10275973, 8054141, 6387767,
    5276851, 3610477, 3055019, 1944103, 1388645, 833187, 555458, 6658769, 6009133, 4709861,
    3735407, 3085771, 2760953, 1786499, 1136863, 812045, 487227, 324818, 4767521, 4302397,
    3372149, 2674463, 2209339, 1976777, 1511653, 813967, 581405, 348843, 232562, 1930649,
    1742293, 1365581, 1083047, 894691, 800513, 612157, 517979, 235445, 141267, 94178,
    985025, 888925, 696725, 552575, 456475, 408425, 312325, 264275, 168175, 72075,
    48050, 354609, 320013, 250821, 198927, 164331, 147033, 112437, 95139, 60543,
    43245, 17298, 157604, 142228, 111476, 88412, 73036, 65348, 49972, 42284,
    26908, 19220, 11532, 18240449, 16460893, 13791559, 8452891, 7563113, 5783557, 4893779,
    3114223, 2224445, 1334667, 889778, 12447641, 11233237, 9411631, 6982823, 5161217, 3946813,
    3339611, 2125207, 1518005, 910803, 607202, 9965009, 8992813, 7534519, 5590127, 4617931,
    3159637, 2673539, 1701343, 1215245, 729147, 486098, 5827289, 5258773, 4405999, 3268967,
    2700451, 2416193, 1563419, 994903, 710645, 426387, 284258, 4172201, 3765157, 3154591,
    2340503, 1933459, 1729937, 1322893, 712327, 508805, 305283, 203522, 1689569, 1524733,
    1277479, 947807, 782971, 700553, 535717, 453299, 206045, 123627, 82418, 862025,
    777925, 651775, 483575, 399475, 357425, 273325, 231275, 147175, 63075, 42050,
    310329, 280053, 234639, 174087, 143811, 128673, 98397, 83259, 52983, 37845,
    15138, 137924, 124468, 104284, 77372, 63916, 57188, 43732, 37004, 23548,
    16820, 10092, 7829729, 7065853, 5920039, 5538101, 3246473, 2482597, 2100659, 1336783,
    954845, 572907, 381938, 6268121, 5656597, 4739311, 4433549, 2904739, 1987453, 1681691,
    1070167, 764405, 458643, 305762, 3665441, 3307837, 2771431, 2592629, 1698619, 1519817,
    983411, 625807, 447005, 268203, 178802, 2624369, 2368333, 1984279, 1856261, 1216171,
    1088153, 832117, 448063, 320045, 192027, 128018, 1062761, 959077, 803551, 751709,
    492499, 440657, 336973, 285131, 129605, 77763, 51842, 542225, 489325, 409975,
    383525, 251275, 224825, 171925, 145475, 92575, 39675, 26450, 195201, 176157,
    147591, 138069, 90459, 80937, 61893, 52371, 33327, 23805, 9522, 86756,
    78292, 65596, 61364, 40204, 35972, 27508, 23276, 14812, 10580, 6348,
    4277489, 3860173, 3234199, 3025541, 2399567, 1356277, 1147619, 730303, 521645, 312987,
    208658, 2501369, 2257333, 1891279, 1769261, 1403207, 1037153, 671099, 427063, 305045,
    183027, 122018, 1790921, 1616197, 1354111, 1266749, 1004663, 742577, 567853, 305767,
    218405, 131043, 87362, 725249, 654493, 548359, 512981, 406847, 300713, 229957,
    194579, 88445, 53067, 35378, 370025, 333925, 279775, 261725, 207575, 153425,
    117325, 99275, 63175, 27075, 18050, 133209, 120213, 100719, 94221, 74727,
    55233, 42237, 35739, 22743, 16245, 6498, 59204, 53428, 44764, 41876,
    33212, 24548, 18772, 15884, 10108, 7220, 4332, 2002481, 1807117, 1514071,
    1416389, 1123343, 927979, 537251, 341887, 244205, 146523, 97682, 1433729, 1293853,
    1084039, 1014101, 804287, 664411, 454597, 244783, 174845, 104907, 69938, 580601,
    523957, 438991, 410669, 325703, 269059, 184093, 155771, 70805, 42483, 28322,
    296225, 267325, 223975, 209525, 166175, 137275, 93925, 79475, 50575, 21675,
    14450, 106641, 96237, 80631, 75429, 59823, 49419, 33813, 28611, 18207,
    13005, 5202, 47396, 42772, 35836, 33524, 26588, 21964, 15028, 12716,
    8092, 5780, 3468, 838409, 756613, 633919, 593021, 470327, 388531, 347633,
    143143, 102245, 61347, 40898, 339521, 306397, 256711, 240149, 190463, 157339,
    140777, 91091, 41405, 24843, 16562, 173225, 156325, 130975, 122525, 97175,
    80275, 71825, 46475, 29575, 12675, 8450, 62361, 56277, 47151, 44109,
    34983, 28899, 25857, 16731, 10647, 7605, 3042, 27716, 25012, 20956,
    19604, 15548, 12844, 11492, 7436, 4732, 3380, 2028, 243089, 219373,
    183799, 171941, 136367, 112651, 100793, 77077, 29645, 17787, 11858, 124025,
    111925, 93775, 87725, 69575, 57475, 51425, 39325, 21175, 9075, 6050,
    44649, 40293, 33759, 31581, 25047, 20691, 18513, 14157, 7623, 5445,
    2178, 19844, 17908, 15004, 14036, 11132, 9196, 8228, 6292, 3388,
    2420, 1452, 50225, 45325, 37975, 35525, 28175, 23275, 20825, 15925,
    13475, 3675, 2450, 18081, 16317, 13671, 12789, 10143, 8379, 7497,
    5733, 4851, 2205, 882, 8036, 7252, 6076, 5684, 4508, 3724,
    3332, 2548, 2156, 980, 588, 9225, 8325, 6975, 6525, 5175,
    4275, 3825, 2925, 2475, 1575, 450, 4100, 3700, 3100, 2900,
    2300, 1900, 1700, 1300, 1100, 700, 300, 1476, 1332, 1116,
    1044, 828, 684, 612, 468, 396, 252, 180, 55915103, 44346461,
    36634033, 32777819, 25065391, 21209177, 13496749, 9640535, 5784321, 3856214, 41485399, 34270547,
    30663121, 23448269, 19840843, 12625991, 9018565, 5411139, 3607426, 27180089, 24319027, 18596903,
    15735841, 10013717, 7152655, 4291593, 2861062, 20089631, 15362659, 12999173, 8272201, 5908715,
    3545229, 2363486, 13745537, 11630839, 7401443, 5286745, 3172047, 2114698, 8894171, 5659927,
    4042805, 2425683, 1617122, 4789169, 3420835, 2052501, 1368334, 2176895, 1306137, 870758,
    932955, 621970, 373182, 34758037, 28713161, 25690723, 19645847, 16623409, 10578533, 7556095,
    4533657, 3022438, 22772507, 20375401, 15581189, 13184083, 8389871, 5992765, 3595659, 2397106,
    16831853, 12871417, 10891199, 6930763, 4950545, 2970327, 1980218, 11516531, 9744757, 6201209,
    4429435, 2657661, 1771774, 7451873, 4742101, 3387215, 2032329, 1354886, 4012547, 2866105,
    1719663, 1146442, 1823885, 1094331, 729554, 781665, 521110, 312666, 21303313, 19060859,
    14575951, 12333497, 7848589, 5606135, 3363681, 2242454, 15745927, 12041003, 10188541, 6483617,
    4631155, 2778693, 1852462, 10773529, 9116063, 5801131, 4143665, 2486199, 1657466, 6971107,
    4436159, 3168685, 1901211, 1267474, 3753673, 2681195, 1608717, 1072478, 1706215, 1023729,
    682486, 731235, 487490, 292494, 12488149, 9549761, 8080567, 5142179, 3672985, 2203791,
    1469194, 8544523, 7229981, 4600897, 3286355, 1971813, 1314542, 5528809, 3518333, 2513095,
    1507857, 1005238, 2977051, 2126465, 1275879, 850586, 1353205, 811923, 541282, 579945,
    386630, 231978, 7058519, 5972593, 3800741, 2714815, 1628889, 1085926, 4567277, 2906449,
    2076035, 1245621, 830414, 2459303, 1756645, 1053987, 702658, 1117865, 670719, 447146,
    479085, 319390, 191634, 4086511, 2600507, 1857505, 1114503, 743002, 2200429, 1571735,
    943041, 628694, 1000195, 600117, 400078, 428655, 285770, 171462, 1682681, 1201915,
    721149, 480766, 764855, 458913, 305942, 327795, 218530, 131118, 647185, 388311,
    258874, 277365, 184910, 110946, 176505, 117670, 70602, 50430, 50459971, 40019977,
    33059981, 29579983, 22619987, 19139989, 12179993, 8699995, 5219997, 3479998, 37438043, 30927079,
    27671597, 21160633, 17905151, 11394187, 8138705, 4883223, 3255482, 24528373, 21946439, 16782571,
    14200637, 9036769, 6454835, 3872901, 2581934, 18129667, 13863863, 11730961, 7465157, 5332255,
    3199353, 2132902, 12404509, 10496123, 6679351, 4770965, 2862579, 1908386, 8026447, 5107739,
    3648385, 2189031, 1459354, 4321933, 3087095, 1852257, 1234838, 1964515, 1178709, 785806,
    841935, 561290, 336774, 28306813, 23383889, 20922427, 15999503, 13538041, 8615117, 6153655,
    3692193, 2461462, 18545843, 16593649, 12689261, 10737067, 6832679, 4880485, 2928291, 1952194,
    13707797, 10482433, 8869751, 5644387, 4031705, 2419023, 1612682, 9379019, 7936093, 5050241,
    3607315, 2164389, 1442926, 6068777, 3861949, 2758535, 1655121, 1103414, 3267803, 2334145,
    1400487, 933658, 1485365, 891219, 594146, 636585, 424390, 254634, 17349337, 15523091,
    11870599, 10044353, 6391861, 4565615, 2739369, 1826246, 12823423, 9806147, 8297509, 5280233,
    3771595, 2262957, 1508638, 8773921, 7424087, 4724419, 3374585, 2024751, 1349834, 5677243,
    3612791, 2580565, 1548339, 1032226, 3056977, 2183555, 1310133, 873422, 1389535, 833721,
    555814, 595515, 397010, 238206, 10170301, 7777289, 6580783, 4187771, 2991265, 1794759,
    1196506, 6958627, 5888069, 3746953, 2676395, 1605837, 1070558, 4502641, 2865317, 2046655,
    1227993, 818662, 2424499, 1731785, 1039071, 692714, 1102045, 661227, 440818, 472305,
    314870, 188922, 5748431, 4864057, 3095309, 2210935, 1326561, 884374, 3719573, 2367001,
    1690715, 1014429, 676286, 2002847, 1430605, 858363, 572242, 910385, 546231, 364154,
    390165, 260110, 156066, 3328039, 2117843, 1512745, 907647, 605098, 1792021, 1280015,
    768009, 512006, 814555, 488733, 325822, 349095, 232730, 139638, 1370369, 978835,
    587301, 391534, 622895, 373737, 249158, 266955, 177970, 106782, 527065, 316239,
    210826, 225885, 150590, 90354, 143745, 95830, 57498, 41070, 42277273, 33530251,
    27698903, 24783229, 18951881, 16036207, 10204859, 7289185, 4373511, 2915674, 26280467, 21709951,
    19424693, 14854177, 12568919, 7998403, 5713145, 3427887, 2285258, 17218237, 15405791, 11780899,
    9968453, 6343561, 4531115, 2718669, 1812446, 12726523, 9732047, 8234809, 5240333, 3743095,
    2245857, 1497238, 8707621, 7367987, 4688719, 3349085, 2009451, 1339634, 5634343, 3585491,
    2561065, 1536639, 1024426, 3033877, 2167055, 1300233, 866822, 1379035, 827421, 551614,
    591015, 394010, 236406, 23716519, 19591907, 17529601, 13404989, 11342683, 7218071, 5155765,
    3093459, 2062306, 15538409, 13902787, 10631543, 8995921, 5724677, 4089055, 2453433, 1635622,
    11484911, 8782579, 7431413, 4729081, 3377915, 2026749, 1351166, 7858097, 6649159, 4231283,
    3022345, 1813407, 1208938, 5084651, 3235687, 2311205, 1386723, 924482, 2737889, 1955635,
    1173381, 782254, 1244495, 746697, 497798, 533355, 355570, 213342, 12178753, 10896779,
    8332831, 7050857, 4486909, 3204935, 1922961, 1281974, 9001687, 6883643, 5824621, 3706577,
    2647555, 1588533, 1059022, 6159049, 5211503, 3316411, 2368865, 1421319, 947546, 3985267,
    2536079, 1811485, 1086891, 724594, 2145913, 1532795, 919677, 613118, 975415, 585249,
    390166, 418035, 278690, 167214, 7139269, 5459441, 4619527, 2939699, 2099785, 1259871,
    839914, 4884763, 4133261, 2630257, 1878755, 1127253, 751502, 3160729, 2011373, 1436695,
    862017, 574678, 1701931, 1215665, 729399, 486266, 773605, 464163, 309442, 331545,
    221030, 132618, 4035239, 3414433, 2172821, 1552015, 931209, 620806, 2611037, 1661569,
    1186835, 712101, 474734, 1405943, 1004245, 602547, 401698, 639065, 383439, 255626,
    273885, 182590, 109554, 2336191, 1486667, 1061905, 637143, 424762, 1257949, 898535,
    539121, 359414, 571795, 343077, 228718, 245055, 163370, 98022, 961961, 687115,
    412269, 274846, 437255, 262353, 174902, 187395, 124930, 74958, 369985, 221991,
    147994, 158565, 105710, 63426, 100905, 67270, 40362, 28830, 39549707, 29343331,
    24240143, 21688549, 16585361, 14033767, 8930579, 6378985, 3827391, 2551594, 24584953, 20309309,
    18171487, 13895843, 11758021, 7482377, 5344555, 3206733, 2137822, 15068197, 13482071, 10309819,
    8723693, 5551441, 3965315, 2379189, 1586126, 11137363, 8516807, 7206529, 4585973, 3275695,
    1965417, 1310278, 7620301, 6447947, 4103239, 2930885, 1758531, 1172354, 4930783, 3137771,
    2241265, 1344759, 896506, 2655037, 1896455, 1137873, 758582, 1206835, 724101, 482734,
    517215, 344810, 206886, 22186421, 18327913, 16398659, 12540151, 10610897, 6752389, 4823135,
    2893881, 1929254, 13598129, 12166747, 9303983, 7872601, 5009837, 3578455, 2147073, 1431382,
    10050791, 7685899, 6503453, 4138561, 2956115, 1773669, 1182446, 6876857, 5818879, 3702923,
    2644945, 1586967, 1057978, 4449731, 2831647, 2022605, 1213563, 809042, 2396009, 1711435,
    1026861, 684574, 1089095, 653457, 435638, 466755, 311170, 186702, 11393027, 10193761,
    7795229, 6595963, 4197431, 2998165, 1798899, 1199266, 8420933, 6439537, 5448839, 3467443,
    2476745, 1486047, 990698, 5761691, 4875277, 3102449, 2216035, 1329621, 886414, 3728153,
    2372461, 1694615, 1016769, 677846, 2007467, 1433905, 860343, 573562, 912485, 547491,
    364994, 391065, 260710, 156426, 6247789, 4777721, 4042687, 2572619, 1837585, 1102551,
    735034, 4274803, 3617141, 2301817, 1644155, 986493, 657662, 2766049, 1760213, 1257295,
    754377, 502918, 1489411, 1063865, 638319, 425546, 677005, 406203, 270802, 290145,
    193430, 116058, 3531359, 2988073, 1901501, 1358215, 814929, 543286, 2284997, 1454089,
    1038635, 623181, 415454, 1230383, 878845, 527307, 351538, 559265, 335559, 223706,
    239685, 159790, 95874, 2044471, 1301027, 929305, 557583, 371722, 1100869, 786335,
    471801, 314534, 500395, 300237, 200158, 214455, 142970, 85782, 841841, 601315,
    360789, 240526, 382655, 229593, 153062, 163995, 109330, 65598, 323785, 194271,
    129514, 138765, 92510, 55506, 88305, 58870, 35322, 25230, 24877283, 23272297,
    15247367, 13642381, 10432409, 8827423, 5617451, 4012465, 2407479, 1604986, 19498411, 12774821,
    11430103, 8740667, 7395949, 4706513, 3361795, 2017077, 1344718, 11950639, 10692677, 8176753,
    6918791, 4402867, 3144905, 1886943, 1257962, 7005547, 5357183, 4533001, 2884637, 2060455,
    1236273, 824182, 4793269, 4055843, 2580991, 1843565, 1106139, 737426, 3101527, 1973699,
    1409785, 845871, 563914, 1670053, 1192895, 715737, 477158, 759115, 455469, 303646,
    325335, 216890, 130134, 17596127, 11528497, 10314971, 7887919, 6674393, 4247341, 3033815,
    1820289, 1213526, 10784723, 9649489, 7379021, 6243787, 3973319, 2838085, 1702851, 1135234,
    6322079, 4834531, 4090757, 2603209, 1859435, 1115661, 743774, 4325633, 3660151, 2329187,
    1663705, 998223, 665482, 2798939, 1781143, 1272245, 763347, 508898, 1507121, 1076515,
    645909, 430606, 685055, 411033, 274022, 293595, 195730, 117438, 9035849, 8084707,
    6182423, 5231281, 3328997, 2377855, 1426713, 951142, 5296877, 4050553, 3427391, 2181067,
    1557905, 934743, 623162, 3624179, 3066613, 1951481, 1393915, 836349, 557566, 2345057,
    1492309, 1065935, 639561, 426374, 1262723, 901945, 541167, 360778, 573965, 344379,
    229586, 245985, 163990, 98394, 4955143, 3789227, 3206269, 2040353, 1457395, 874437,
    582958, 3390361, 2868767, 1825579, 1303985, 782391, 521594, 2193763, 1396031, 997165,
    598299, 398866, 1181257, 843755, 506253, 337502, 536935, 322161, 214774, 230115,
    153410, 92046, 2221271, 1879537, 1196069, 854335, 512601, 341734, 1437293, 914641,
    653315, 391989, 261326, 773927, 552805, 331683, 221122, 351785, 211071, 140714,
    150765, 100510, 60306, 1285999, 818363, 584545, 350727, 233818, 692461, 494615,
    296769, 197846, 314755, 188853, 125902, 134895, 89930, 53958, 529529, 378235,
    226941, 151294, 240695, 144417, 96278, 103155, 68770, 41262, 203665, 122199,
    81466, 87285, 58190, 34914, 55545, 37030, 22218, 15870, 16976747, 15881473,
    12595651, 9309829, 7119281, 6024007, 3833459, 2738185, 1642911, 1095274, 13306099, 10553113,
    7800127, 5964803, 5047141, 3211817, 2294155, 1376493, 917662, 9872267, 7296893, 5579977,
    4721519, 3004603, 2146145, 1287687, 858458, 5787191, 4425499, 3744653, 2382961, 1702115,
    1021269, 680846, 3271021, 2767787, 1761319, 1258085, 754851, 503234, 2116543, 1346891,
    962065, 577239, 384826, 1139677, 814055, 488433, 325622, 518035, 310821, 207214,
    222015, 148010, 88806, 12007943, 9523541, 7039139, 5382871, 4554737, 2898469, 2070335,
    1242201, 828134, 8909119, 6585001, 5035589, 4260883, 2711471, 1936765, 1162059, 774706,
    5222587, 3993743, 3379321, 2150477, 1536055, 921633, 614422, 2951897, 2497759, 1589483,
    1135345, 681207, 454138, 1910051, 1215487, 868205, 520923, 347282, 1028489, 734635,
    440781, 293854, 467495, 280497, 186998, 200355, 133570, 80142, 7464397, 5517163,
    4219007, 3569929, 2271773, 1622695, 973617, 649078, 4375681, 3346109, 2831323, 1801751,
    1286965, 772179, 514786, 2473211, 2092717, 1331729, 951235, 570741, 380494, 1600313,
    1018381, 727415, 436449, 290966, 861707, 615505, 369303, 246202, 391685, 235011,
    156674, 167865, 111910, 67146, 4093379, 3130231, 2648657, 1685509, 1203935, 722361,
    481574, 2313649, 1957703, 1245811, 889865, 533919, 355946, 1497067, 952679, 680485,
    408291, 272194, 806113, 575795, 345477, 230318, 366415, 219849, 146566, 157035,
    104690, 62814, 1834963, 1552661, 988057, 705755, 423453, 282302, 1187329, 755573,
    539695, 323817, 215878, 639331, 456665, 273999, 182666, 290605, 174363, 116242,
    124545, 83030, 49818, 877591, 558467, 398905, 239343, 159562, 472549, 337535,
    202521, 135014, 214795, 128877, 85918, 92055, 61370, 36822, 361361, 258115,
    154869, 103246, 164255, 98553, 65702, 70395, 46930, 28158, 138985, 83391,
    55594, 59565, 39710, 23826, 37905, 25270, 15162, 10830, 13590803, 12713977,
    10083499, 8329847, 5699369, 4822543, 3068891, 2192065, 1315239, 876826, 10652251, 8448337,
    6979061, 4775147, 4040509, 2571233, 1836595, 1101957, 734638, 7903283, 6528799, 4467073,
    3779831, 2405347, 1718105, 1030863, 687242, 5178013, 3542851, 2997797, 1907689, 1362635,
    817581, 545054, 2926703, 2476441, 1575917, 1125655, 675393, 450262, 1694407, 1078259,
    770185, 462111, 308074, 912373, 651695, 391017, 260678, 414715, 248829, 165886,
    177735, 118490, 71094, 9613007, 7624109, 6298177, 4309279, 3646313, 2320381, 1657415,
    994449, 662966, 7132231, 5891843, 4031261, 3411067, 2170679, 1550485, 930291, 620194,
    4672841, 3197207, 2705329, 1721573, 1229695, 737817, 491878, 2641171, 2234837, 1422169,
    1015835, 609501, 406334, 1529099, 973063, 695045, 417027, 278018, 823361, 588115,
    352869, 235246, 374255, 224553, 149702, 160395, 106930, 64158, 5975653, 4936409,
    3377543, 2857921, 1818677, 1299055, 779433, 519622, 3915083, 2678741, 2266627, 1442399,
    1030285, 618171, 412114, 2212873, 1872431, 1191547, 851105, 510663, 340442, 1281137,
    815269, 582335, 349401, 232934, 689843, 492745, 295647, 197098, 313565, 188139,
    125426, 134385, 89590, 53754, 3662497, 2505919, 2120393, 1349341, 963815, 578289,
    385526, 2070107, 1751629, 1114673, 796195, 477717, 318478, 1198483, 762671, 544765,
    326859, 217906, 645337, 460955, 276573, 184382, 293335, 176001, 117334, 125715,
    83810, 50286, 1641809, 1389223, 884051, 631465, 378879, 252586, 950521, 604877,
    432055, 259233, 172822, 511819, 365585, 219351, 146234, 232645, 139587, 93058,
    99705, 66470, 39882, 785213, 499681, 356915, 214149, 142766, 422807, 302005,
    181203, 120802, 192185, 115311, 76874, 82365, 54910, 32946, 289289, 206635,
    123981, 82654, 131495, 78897, 52598, 56355, 37570, 22542, 111265, 66759,
    44506, 47685, 31790, 19074, 30345, 20230, 12138, 8670, 7947563, 7434817,
    5896579, 4871087, 4358341, 2820103, 1794611, 1281865, 769119, 512746, 6229171, 4940377,
    4081181, 3651583, 2362789, 1503593, 1073995, 644397, 429598, 4621643, 3817879, 3415997,
    2210351, 1406587, 1004705, 602823, 401882, 3027973, 2709239, 1753037, 1115569, 796835,
    478101, 318734, 2238067, 1448161, 921557, 658255, 394953, 263302, 1295723, 824551,
    588965, 353379, 235586, 533533, 381095, 228657, 152438, 242515, 145509, 97006,
    103935, 69290, 41574, 5621447, 4458389, 3683017, 3295331, 2132273, 1356901, 969215,
    581529, 387686, 4170751, 3445403, 3082729, 1994707, 1269359, 906685, 544011, 362674,
    2732561, 2444923, 1582009, 1006733, 719095, 431457, 287638, 2019719, 1306877, 831649,
    594035, 356421, 237614, 1169311, 744107, 531505, 318903, 212602, 481481, 343915,
    206349, 137566, 218855, 131313, 87542, 93795, 62530, 37518, 3494413, 2886689,
    2582827, 1671241, 1063517, 759655, 455793, 303862, 2289443, 2048449, 1325467, 843479,
    602485, 361491, 240994, 1692197, 1094951, 696787, 497705, 298623, 199082, 979693,
    623441, 445315, 267189, 178126, 403403, 288145, 172887, 115258, 183365, 110019,
    73346, 78585, 52390, 31434, 2141737, 1916291, 1239953, 789061, 563615, 338169,
    225446, 1583023, 1024309, 651833, 465595, 279357, 186238, 916487, 583219, 416585,
    249951, 166634, 377377, 269555, 161733, 107822, 171535, 102921, 68614, 73515,
    49010, 29406, 1255501, 812383, 516971, 369265, 221559, 147706, 726869, 462553,
    330395, 198237, 132158, 299299, 213785, 128271, 85514, 136045, 81627, 54418,
    58305, 38870, 23322, 600457, 382109, 272935, 163761, 109174, 247247, 176605,
    105963, 70642, 112385, 67431, 44954, 48165, 32110, 19266, 221221, 158015,
    94809, 63206, 100555, 60333, 40222, 43095, 28730, 17238, 65065, 39039,
    26026, 27885, 18590, 11154, 17745, 11830, 7098, 5070, 5690267, 5323153,
    4221811, 3487583, 3120469, 2386241, 1284899, 917785, 550671, 367114, 4459939, 3537193,
    2922029, 2614447, 1999283, 1076537, 768955, 461373, 307582, 3308987, 2733511, 2445773,
    1870297, 1007083, 719345, 431607, 287738, 2167957, 1939751, 1483339, 798721, 570515,
    342309, 228206, 1602403, 1225367, 659813, 471295, 282777, 188518, 1096381, 590359,
    421685, 253011, 168674, 451451, 322465, 193479, 128986, 173635, 104181, 69454,
    74415, 49610, 29766, 4024823, 3192101, 2636953, 2359379, 1804231, 971509, 693935,
    416361, 277574, 2986159, 2466827, 2207161, 1687829, 908831, 649165, 389499, 259666,
    1956449, 1750507, 1338623, 720797, 514855, 308913, 205942, 1446071, 1105819, 595441,
    425315, 255189, 170126, 989417, 532763, 380545, 228327, 152218, 407407, 291005,
    174603, 116402, 156695, 94017, 62678, 67155, 44770, 26862, 2501917, 2066801,
    1849243, 1414127, 761453, 543895, 326337, 217558, 1639187, 1466641, 1121549, 603911,
    431365, 258819, 172546, 1211573, 926497, 498883, 356345, 213807, 142538, 828971,
    446369, 318835, 191301, 127534, 341341, 243815, 146289, 97526, 131285, 78771,
    52514, 56265, 37510, 22506, 1533433, 1372019, 1049191, 564949, 403535, 242121,
    161414, 1133407, 866723, 466697, 333355, 200013, 133342, 775489, 417571, 298265,
    178959, 119306, 319319, 228085, 136851, 91234, 122815, 73689, 49126, 52635,
    35090, 21054, 898909, 687401, 370139, 264385, 158631, 105754, 615043, 331177,
    236555, 141933, 94622, 253253, 180895, 108537, 72358, 97405, 58443, 38962,
    41745, 27830, 16698, 508079, 273581, 195415, 117249, 78166, 209209, 149435,
    89661, 59774, 80465, 48279, 32186, 34485, 22990, 13794, 187187, 133705,
    80223, 53482, 71995, 43197, 28798, 30855, 20570, 12342, 55055, 33033,
    22022, 23595, 15730, 9438, 12705, 8470, 5082, 3630, 2304323, 2155657,
    1709659, 1412327, 1263661, 966329, 817663, 371665, 222999, 148666, 1806091, 1432417,
    1183301, 1058743, 809627, 685069, 311395, 186837, 124558, 1340003, 1106959, 990437,
    757393, 640871, 291305, 174783, 116522, 877933, 785519, 600691, 508277, 231035,
    138621, 92414, 648907, 496223, 419881, 190855, 114513, 76342, 443989, 375683,
    170765, 102459, 68306, 287287, 130585, 78351, 52234, 110495, 66297, 44198,
    30135, 20090, 12054, 1629887, 1292669, 1067857, 955451, 730639, 618233, 281015,
    168609, 112406, 1209271, 998963, 893809, 683501, 578347, 262885, 157731, 105154,
    792281, 708883, 542087, 458689, 208495, 125097, 83398, 585599, 447811, 378917,
    172235, 103341, 68894, 400673, 339031, 154105, 92463, 61642, 259259, 117845,
    70707, 47138, 99715, 59829, 39886, 27195, 18130, 10878, 1013173, 836969,
    748867, 572663, 484561, 220255, 132153, 88102, 663803, 593929, 454181, 384307,
    174685, 104811, 69874, 490637, 375193, 317471, 144305, 86583, 57722, 335699,
    284053, 129115, 77469, 51646, 217217, 98735, 59241, 39494, 83545, 50127,
    33418, 22785, 15190, 9114, 620977, 555611, 424879, 359513, 163415, 98049,
    65366, 458983, 350987, 296989, 134995, 80997, 53998, 314041, 265727, 120785,
    72471, 48314, 203203, 92365, 55419, 36946, 78155, 46893, 31262, 21315,
    14210, 8526, 364021, 278369, 235543, 107065, 64239, 42826, 249067, 210749,
    95795, 57477, 38318, 161161, 73255, 43953, 29302, 61985, 37191, 24794,
    16905, 11270, 6762, 205751, 174097, 79135, 47481, 31654, 133133, 60515,
    36309, 24206, 51205, 30723, 20482, 13965, 9310, 5586, 119119, 54145,
    32487, 21658, 45815, 27489, 18326, 12495, 8330, 4998, 35035, 21021,
    14014, 9555, 6370, 3822, 8085, 5390, 3234, 1470, 1175675, 1099825,
    872275, 720575, 644725, 493025, 417175, 265475, 113775, 75850, 921475, 730825,
    603725, 540175, 413075, 349525, 222425, 95325, 63550, 683675, 564775, 505325,
    386425, 326975, 208075, 89175, 59450, 447925, 400775, 306475, 259325, 165025,
    70725, 47150, 331075, 253175, 214225, 136325, 58425, 38950, 226525, 191675,
    121975, 52275, 34850, 146575, 93275, 39975, 26650, 78925, 33825, 22550,
    21525, 14350, 6150, 831575, 659525, 544825, 487475, 372775, 315425, 200725,
    86025, 57350, 616975, 509675, 456025, 348725, 295075, 187775, 80475, 53650,
    404225, 361675, 276575, 234025, 148925, 63825, 42550, 298775, 228475, 193325,
    123025, 52725, 35150, 204425, 172975, 110075, 47175, 31450, 132275, 84175,
    36075, 24050, 71225, 30525, 20350, 19425, 12950, 5550, 516925, 427025,
    382075, 292175, 247225, 157325, 67425, 44950, 338675, 303025, 231725, 196075,
    124775, 53475, 35650, 250325, 191425, 161975, 103075, 44175, 29450, 171275,
    144925, 92225, 39525, 26350, 110825, 70525, 30225, 20150, 59675, 25575,
    17050, 16275, 10850, 4650, 316825, 283475, 216775, 183425, 116725, 50025,
    33350, 234175, 179075, 151525, 96425, 41325, 27550, 160225, 135575, 86275,
    36975, 24650, 103675, 65975, 28275, 18850, 55825, 23925, 15950, 15225,
    10150, 4350, 185725, 142025, 120175, 76475, 32775, 21850, 127075, 107525,
    68425, 29325, 19550, 82225, 52325, 22425, 14950, 44275, 18975, 12650,
    12075, 8050, 3450, 104975, 88825, 56525, 24225, 16150, 67925, 43225,
    18525, 12350, 36575, 15675, 10450, 9975, 6650, 2850, 60775, 38675,
    16575, 11050, 32725, 14025, 9350, 8925, 5950, 2550, 25025, 10725,
    7150, 6825, 4550, 1950, 5775, 3850, 1650, 1050, 423243, 395937,
    314019, 259407, 232101, 177489, 150183, 95571, 68265, 27306, 331731, 263097,
    217341, 194463, 148707, 125829, 80073, 57195, 22878, 246123, 203319, 181917,
    139113, 117711, 74907, 53505, 21402, 161253, 144279, 110331, 93357, 59409,
    42435, 16974, 119187, 91143, 77121, 49077, 35055, 14022, 81549, 69003,
    43911, 31365, 12546, 52767, 33579, 23985, 9594, 28413, 20295, 8118,
    12915, 5166, 3690, 299367, 237429, 196137, 175491, 134199, 113553, 72261,
    51615, 20646, 222111, 183483, 164169, 125541, 106227, 67599, 48285, 19314,
    145521, 130203, 99567, 84249, 53613, 38295, 15318, 107559, 82251, 69597,
    44289, 31635, 12654, 73593, 62271, 39627, 28305, 11322, 47619, 30303,
    21645, 8658, 25641, 18315, 7326, 11655, 4662, 3330, 186093, 153729,
    137547, 105183, 89001, 56637, 40455, 16182, 121923, 109089, 83421, 70587,
    44919, 32085, 12834, 90117, 68913, 58311, 37107, 26505, 10602, 61659,
    52173, 33201, 23715, 9486, 39897, 25389, 18135, 7254, 21483, 15345,
    6138, 9765, 3906, 2790, 114057, 102051, 78039, 66033, 42021, 30015,
    12006, 84303, 64467, 54549, 34713, 24795, 9918, 57681, 48807, 31059,
    22185, 8874, 37323, 23751, 16965, 6786, 20097, 14355, 5742, 9135,
    3654, 2610, 66861, 51129, 43263, 27531, 19665, 7866, 45747, 38709,
    24633, 17595, 7038, 29601, 18837, 13455, 5382, 15939, 11385, 4554,
    7245, 2898, 2070, 37791, 31977, 20349, 14535, 5814, 24453, 15561,
    11115, 4446, 13167, 9405, 3762, 5985, 2394, 1710, 21879, 13923,
    9945, 3978, 11781, 8415, 3366, 5355, 2142, 1530, 9009, 6435,
    2574, 4095, 1638, 1170, 3465, 1386, 990, 630, 188108, 175972,
    139564, 115292, 103156, 78884, 66748, 42476, 30340, 18204, 147436, 116932,
    96596, 86428, 66092, 55924, 35588, 25420, 15252, 109388, 90364, 80852,
    61828, 52316, 33292, 23780, 14268, 71668, 64124, 49036, 41492, 26404,
    18860, 11316, 52972, 40508, 34276, 21812, 15580, 9348, 36244, 30668,
    19516, 13940, 8364, 23452, 14924, 10660, 6396, 12628, 9020, 5412,
    5740, 3444, 2460, 133052, 105524, 87172, 77996, 59644, 50468, 32116,
    22940, 13764, 98716, 81548, 72964, 55796, 47212, 30044, 21460, 12876,
    64676, 57868, 44252, 37444, 23828, 17020, 10212, 47804, 36556, 30932,
    19684, 14060, 8436, 32708, 27676, 17612, 12580, 7548, 21164, 13468,
    9620, 5772, 11396, 8140, 4884, 5180, 3108, 2220, 82708, 68324,
    61132, 46748, 39556, 25172, 17980, 10788, 54188, 48484, 37076, 31372,
    19964, 14260, 8556, 40052, 30628, 25916, 16492, 11780, 7068, 27404,
    23188, 14756, 10540, 6324, 17732, 11284, 8060, 4836, 9548, 6820,
    4092, 4340, 2604, 1860, 50692, 45356, 34684, 29348, 18676, 13340,
    8004, 37468, 28652, 24244, 15428, 11020, 6612, 25636, 21692, 13804,
    9860, 5916, 16588, 10556, 7540, 4524, 8932, 6380, 3828, 4060,
    2436, 1740, 29716, 22724, 19228, 12236, 8740, 5244, 20332, 17204,
    10948, 7820, 4692, 13156, 8372, 5980, 3588, 7084, 5060, 3036,
    3220, 1932, 1380, 16796, 14212, 9044, 6460, 3876, 10868, 6916,
    4940, 2964, 5852, 4180, 2508, 2660, 1596, 1140, 9724, 6188,
    4420, 2652, 5236, 3740, 2244, 2380, 1428, 1020, 4004, 2860,
    1716, 1820, 1092, 780, 1540, 924, 660, 420,
], dtype=jnp.int32)
