"""Decimation filter kernels of the shorter stages: 2, 4, 16 and 32."""

import numpy as np

_D_2_R_2 = (
    0.000399985734121014,
    0.002073370222476234,
    0.004853019240304940,
    0.005977464755456102,
    0.002625480716699286,
    -0.002713628293157090,
    -0.003379460736391527,
    0.001637205667907783,
    0.004080689203761314,
    -0.000982433398470081,
    -0.005119016867477646,
    0.000177424749467386,
    0.006424890506348696,
    0.001008090651156955,
    -0.007915926496343137,
    -0.002717062331286239,
    0.009511042111613645,
    0.005077150379032227,
    -0.011151300589456603,
    -0.008251061374053964,
    0.012781117215688672,
    0.012490374909303374,
    -0.014344287749952384,
    -0.018209086168089920,
    0.015778580923975386,
    0.026178028229057050,
    -0.017029165534577999,
    -0.038051941291319488,
    0.018060406839966188,
    0.058210457193828925,
    -0.018831122390764166,
    -0.102778567522516130,
    0.019291268777910851,
    0.317182812089170980,
    0.480536048712957740,
    0.317182812089170980,
    0.019291268777910851,
    -0.102778567522516130,
    -0.018831122390764166,
    0.058210457193828925,
    0.018060406839966188,
    -0.038051941291319488,
    -0.017029165534577999,
    0.026178028229057050,
    0.015778580923975386,
    -0.018209086168089920,
    -0.014344287749952384,
    0.012490374909303374,
    0.012781117215688672,
    -0.008251061374053964,
    -0.011151300589456603,
    0.005077150379032227,
    0.009511042111613645,
    -0.002717062331286239,
    -0.007915926496343137,
    0.001008090651156955,
    0.006424890506348696,
    0.000177424749467386,
    -0.005119016867477646,
    -0.000982433398470081,
    0.004080689203761314,
    0.001637205667907783,
    -0.003379460736391527,
    -0.002713628293157090,
    0.002625480716699286,
    0.005977464755456102,
    0.004853019240304940,
    0.002073370222476234,
    0.000399985734121014,
)

_D_4_R_4 = (
    0.000042167047949931,
    0.000162480875041441,
    0.000413474829003805,
    0.000815488719349860,
    0.001323484844111109,
    0.001803932401530970,
    0.002050805379425780,
    0.001851476423100084,
    0.001088358238163842,
    -0.000165599354540670,
    -0.001612840277093291,
    -0.002799173360323900,
    -0.003280737659419560,
    -0.002830930204582274,
    -0.001589296551711622,
    -0.000060142418430366,
    0.001072157673911288,
    0.001252059507347206,
    0.000346781210023729,
    -0.001233491421169468,
    -0.002682865592015316,
    -0.003178340139233828,
    -0.002320119390193667,
    -0.000402092792444196,
    0.001661437823975322,
    0.002761727219457103,
    0.002186981534424376,
    0.000071307331744879,
    -0.002570893712874658,
    -0.004301512250227543,
    -0.004015094439084645,
    -0.001606879839533175,
    0.001838674337622738,
    0.004510048531846937,
    0.004804547613530567,
    0.002266863620581679,
    -0.002004704037111716,
    -0.005785548895574678,
    -0.006849655924079080,
    -0.004239720077392586,
    0.001024318787772757,
    0.006275193248599259,
    0.008511512338709764,
    0.006070603106211769,
    -0.000247611530141919,
    -0.007317511868656072,
    -0.011170336815604164,
    -0.009152698013614463,
    -0.001621157345452147,
    0.007851435931989321,
    0.014073238852672171,
    0.012972692080589394,
    0.004087473189926854,
    -0.008634954375856124,
    -0.018413964067748419,
    -0.019050011539439745,
    -0.008545626179408438,
    0.009039966712164142,
    0.024793283315122296,
    0.029034181171149441,
    0.016560363014866013,
    -0.009522346448795137,
    -0.037569562545468192,
    -0.051411140638474247,
    -0.037221789978391415,
    0.009679493935209005,
    0.081286213859684806,
    0.158552299980228740,
    0.217917169253869340,
    0.240164834839879550,
    0.217917169253869340,
    0.158552299980228740,
    0.081286213859684806,
    0.009679493935209005,
    -0.037221789978391415,
    -0.051411140638474247,
    -0.037569562545468192,
    -0.009522346448795137,
    0.016560363014866013,
    0.029034181171149441,
    0.024793283315122296,
    0.009039966712164142,
    -0.008545626179408438,
    -0.019050011539439745,
    -0.018413964067748419,
    -0.008634954375856124,
    0.004087473189926854,
    0.012972692080589394,
    0.014073238852672171,
    0.007851435931989321,
    -0.001621157345452147,
    -0.009152698013614463,
    -0.011170336815604164,
    -0.007317511868656072,
    -0.000247611530141919,
    0.006070603106211769,
    0.008511512338709764,
    0.006275193248599259,
    0.001024318787772757,
    -0.004239720077392586,
    -0.006849655924079080,
    -0.005785548895574678,
    -0.002004704037111716,
    0.002266863620581679,
    0.004804547613530567,
    0.004510048531846937,
    0.001838674337622738,
    -0.001606879839533175,
    -0.004015094439084645,
    -0.004301512250227543,
    -0.002570893712874658,
    0.000071307331744879,
    0.002186981534424376,
    0.002761727219457103,
    0.001661437823975322,
    -0.000402092792444196,
    -0.002320119390193667,
    -0.003178340139233828,
    -0.002682865592015316,
    -0.001233491421169468,
    0.000346781210023729,
    0.001252059507347206,
    0.001072157673911288,
    -0.000060142418430366,
    -0.001589296551711622,
    -0.002830930204582274,
    -0.003280737659419560,
    -0.002799173360323900,
    -0.001612840277093291,
    -0.000165599354540670,
    0.001088358238163842,
    0.001851476423100084,
    0.002050805379425780,
    0.001803932401530970,
    0.001323484844111109,
    0.000815488719349860,
    0.000413474829003805,
    0.000162480875041441,
    0.000042167047949931,
)

_D_16_R_8 = (
    -0.000010553664672862,
    -0.000061498701563991,
    -0.000169601122616288,
    -0.000389180581238296,
    -0.000769984128346191,
    -0.001370862255977838,
    -0.002239657737237394,
    -0.003399895346870093,
    -0.004830710741492023,
    -0.006448450828431843,
    -0.008091858901382079,
    -0.009515843884697457,
    -0.010397443295914180,
    -0.010356613550454467,
    -0.008992200646607676,
    -0.005930785604319544,
    -0.000883275448312690,
    0.006298249742162992,
    0.015572313369334116,
    0.026677316967261836,
    0.039125602626276818,
    0.052226529544645239,
    0.065138652777540620,
    0.076946528099683636,
    0.086753462256061120,
    0.093778457566739207,
    0.097444274566674538,
    0.097444274566674538,
    0.093778457566739207,
    0.086753462256061120,
    0.076946528099683636,
    0.065138652777540620,
    0.052226529544645239,
    0.039125602626276818,
    0.026677316967261836,
    0.015572313369334116,
    0.006298249742162992,
    -0.000883275448312690,
    -0.005930785604319544,
    -0.008992200646607676,
    -0.010356613550454467,
    -0.010397443295914180,
    -0.009515843884697457,
    -0.008091858901382079,
    -0.006448450828431843,
    -0.004830710741492023,
    -0.003399895346870093,
    -0.002239657737237394,
    -0.001370862255977838,
    -0.000769984128346191,
    -0.000389180581238296,
    -0.000169601122616288,
    -0.000061498701563991,
    -0.000010553664672862,
)

_D_32_R_16 = (
    -0.000004024163639795,
    -0.000017672975608646,
    -0.000028369983125930,
    -0.000051841257358260,
    -0.000084114931088978,
    -0.000130374705334955,
    -0.000193165706690690,
    -0.000276282392544972,
    -0.000383294466797586,
    -0.000517836385761646,
    -0.000683246849920059,
    -0.000882378788952720,
    -0.001117308161626894,
    -0.001389043294976996,
    -0.001697213461428019,
    -0.002039760314912465,
    -0.002412643435722481,
    -0.002809577646098091,
    -0.003221818992095683,
    -0.003638016956253216,
    -0.004044149516577933,
    -0.004423556043039536,
    -0.004757080371798020,
    -0.005023332869090757,
    -0.005199075945795754,
    -0.005259732456805450,
    -0.005180010907146506,
    -0.004934635615957972,
    -0.004499164222082719,
    -0.003850869437258024,
    -0.002969657050308204,
    -0.001838988139263688,
    -0.000446770521598867,
    0.001213817123243464,
    0.003143605116121320,
    0.005336851770962665,
    0.007780833517050342,
    0.010455633416035585,
    0.013334149150643793,
    0.016382334116677784,
    0.019559676833852839,
    0.022819914826782396,
    0.026111969807273771,
    0.029381081811115123,
    0.032570111325119062,
    0.035620970792186964,
    0.038476140562399175,
    0.041080219701286683,
    0.043381459308086866,
    0.045333225316341701,
    0.046895339212960678,
    0.048035248704517766,
    0.048728985952954711,
    0.048961878385199747,
    0.048728985952954711,
    0.048035248704517766,
    0.046895339212960678,
    0.045333225316341701,
    0.043381459308086866,
    0.041080219701286683,
    0.038476140562399175,
    0.035620970792186964,
    0.032570111325119062,
    0.029381081811115123,
    0.026111969807273771,
    0.022819914826782396,
    0.019559676833852839,
    0.016382334116677784,
    0.013334149150643793,
    0.010455633416035585,
    0.007780833517050342,
    0.005336851770962665,
    0.003143605116121320,
    0.001213817123243464,
    -0.000446770521598867,
    -0.001838988139263688,
    -0.002969657050308204,
    -0.003850869437258024,
    -0.004499164222082719,
    -0.004934635615957972,
    -0.005180010907146506,
    -0.005259732456805450,
    -0.005199075945795754,
    -0.005023332869090757,
    -0.004757080371798020,
    -0.004423556043039536,
    -0.004044149516577933,
    -0.003638016956253216,
    -0.003221818992095683,
    -0.002809577646098091,
    -0.002412643435722481,
    -0.002039760314912465,
    -0.001697213461428019,
    -0.001389043294976996,
    -0.001117308161626894,
    -0.000882378788952720,
    -0.000683246849920059,
    -0.000517836385761646,
    -0.000383294466797586,
    -0.000276282392544972,
    -0.000193165706690690,
    -0.000130374705334955,
    -0.000084114931088978,
    -0.000051841257358260,
    -0.000028369983125930,
    -0.000017672975608646,
    -0.000004024163639795,
)

_KERNELS = {
    "d_2_r_2": _D_2_R_2,
    "d_4_r_4": _D_4_R_4,
    "d_16_r_8": _D_16_R_8,
    "d_32_r_16": _D_32_R_16,
}

KERNEL_NAMES = tuple(_KERNELS)


def kernel(name):
    """Return a fresh single-precision array of the named decimation kernel.

    Raises KeyError for a name that is not one of ``KERNEL_NAMES``.
    """
    try:
        taps = _KERNELS[name]
    except KeyError:
        raise KeyError(f"unknown decimation kernel: {name!r}") from None
    return np.array(taps, dtype=np.float32)