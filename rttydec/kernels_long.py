"""Decimation filter kernels of the longer stages: 8, 64, 128 and 256."""

import numpy as np

_D_8_R_8 = (
    0.000005299484859782,
    0.000023653198869943,
    0.000045443155025411,
    0.000086660616597102,
    0.000145468147843215,
    0.000227646032445337,
    0.000334591194217999,
    0.000466890457500183,
    0.000622018386430552,
    0.000794466626663634,
    0.000975304575250323,
    0.001152454785657775,
    0.001311296864337127,
    0.001435783630074849,
    0.001509953148215840,
    0.001519741581366084,
    0.001454903824191261,
    0.001310813201213376,
    0.001089882810057675,
    0.000802361759738747,
    0.000466304093914126,
    0.000106589241438445,
    -0.000247017317721992,
    -0.000562646941659305,
    -0.000809708828030606,
    -0.000962510996013040,
    -0.001003685261621032,
    -0.000926952775265634,
    -0.000738799897838057,
    -0.000458730744403599,
    -0.000117916487516219,
    0.000243742648939376,
    0.000581911777806535,
    0.000853035291692318,
    0.001019866746633974,
    0.001056611000192218,
    0.000952962453331239,
    0.000716408838645576,
    0.000372351073038558,
    -0.000038150274869667,
    -0.000462881782404900,
    -0.000844797294892937,
    -0.001129425716907750,
    -0.001272432677940103,
    -0.001246307890160262,
    -0.001045192378203970,
    -0.000687044203214210,
    -0.000212653183490116,
    0.000318579724580746,
    0.000835734644546107,
    0.001265542439063603,
    0.001542487733459282,
    0.001618487960413105,
    0.001470755262270050,
    0.001106608046232222,
    0.000564346197878288,
    -0.000090197750452171,
    -0.000771230463597417,
    -0.001383890554706424,
    -0.001837132239362339,
    -0.002056896211703681,
    -0.001997709076123834,
    -0.001650953765714851,
    -0.001048413504576680,
    -0.000260276733547870,
    0.000612469118131840,
    0.001450527381084600,
    0.002132190093380017,
    0.002550584440683641,
    0.002629881881769309,
    0.002338080196576415,
    0.001694308341293216,
    0.000769260408641065,
    -0.000321736170028782,
    -0.001432485915523021,
    -0.002404976322971185,
    -0.003091310085438950,
    -0.003375549372556256,
    -0.003192330168178722,
    -0.002539372888669491,
    -0.001481713556478757,
    -0.000146533823587781,
    0.001291251516558131,
    0.002631154368260663,
    0.003674321213032700,
    0.004252198884660451,
    0.004252637433548458,
    0.003639528435255283,
    0.002462762274858131,
    0.000856475239499534,
    -0.000974892854265319,
    -0.002781496880057425,
    -0.004301065594668099,
    -0.005295755541230454,
    -0.005587859925192526,
    -0.005089203765495300,
    -0.003819632950038145,
    -0.001911267954229858,
    0.000402995000090862,
    0.002816115056235722,
    0.004985868963592199,
    0.006581423530514738,
    0.007331423828496663,
    0.007066900231758860,
    0.005752595831756849,
    0.003501526672561130,
    0.000569595914029656,
    -0.002670342281476470,
    -0.005772755486290897,
    -0.008277141861910673,
    -0.009772095428011296,
    -0.009957304065452081,
    -0.008694779007964944,
    -0.006041501906687299,
    -0.002257673645446692,
    0.002212348869418207,
    0.006785874581560984,
    0.010810304734210376,
    0.013646746123386143,
    0.014758915386036504,
    0.013796112346034117,
    0.010659097540521932,
    0.005539210274923477,
    -0.001076115841043161,
    -0.008434444147245189,
    -0.015584625308516726,
    -0.021472430244782261,
    -0.025055744331654087,
    -0.025426655616721288,
    -0.021926322954481325,
    -0.014238733805135361,
    -0.002451384366749276,
    0.012925647002682830,
    0.030986186274100380,
    0.050498778538203032,
    0.070015421670629074,
    0.088007266252761618,
    0.103012981470773550,
    0.113783757663955240,
    0.119409036455313980,
    0.119409036455313980,
    0.113783757663955240,
    0.103012981470773550,
    0.088007266252761618,
    0.070015421670629074,
    0.050498778538203032,
    0.030986186274100380,
    0.012925647002682830,
    -0.002451384366749276,
    -0.014238733805135361,
    -0.021926322954481325,
    -0.025426655616721288,
    -0.025055744331654087,
    -0.021472430244782261,
    -0.015584625308516726,
    -0.008434444147245189,
    -0.001076115841043161,
    0.005539210274923477,
    0.010659097540521932,
    0.013796112346034117,
    0.014758915386036504,
    0.013646746123386143,
    0.010810304734210376,
    0.006785874581560984,
    0.002212348869418207,
    -0.002257673645446692,
    -0.006041501906687299,
    -0.008694779007964944,
    -0.009957304065452081,
    -0.009772095428011296,
    -0.008277141861910673,
    -0.005772755486290897,
    -0.002670342281476470,
    0.000569595914029656,
    0.003501526672561130,
    0.005752595831756849,
    0.007066900231758860,
    0.007331423828496663,
    0.006581423530514738,
    0.004985868963592199,
    0.002816115056235722,
    0.000402995000090862,
    -0.001911267954229858,
    -0.003819632950038145,
    -0.005089203765495300,
    -0.005587859925192526,
    -0.005295755541230454,
    -0.004301065594668099,
    -0.002781496880057425,
    -0.000974892854265319,
    0.000856475239499534,
    0.002462762274858131,
    0.003639528435255283,
    0.004252637433548458,
    0.004252198884660451,
    0.003674321213032700,
    0.002631154368260663,
    0.001291251516558131,
    -0.000146533823587781,
    -0.001481713556478757,
    -0.002539372888669491,
    -0.003192330168178722,
    -0.003375549372556256,
    -0.003091310085438950,
    -0.002404976322971185,
    -0.001432485915523021,
    -0.000321736170028782,
    0.000769260408641065,
    0.001694308341293216,
    0.002338080196576415,
    0.002629881881769309,
    0.002550584440683641,
    0.002132190093380017,
    0.001450527381084600,
    0.000612469118131840,
    -0.000260276733547870,
    -0.001048413504576680,
    -0.001650953765714851,
    -0.001997709076123834,
    -0.002056896211703681,
    -0.001837132239362339,
    -0.001383890554706424,
    -0.000771230463597417,
    -0.000090197750452171,
    0.000564346197878288,
    0.001106608046232222,
    0.001470755262270050,
    0.001618487960413105,
    0.001542487733459282,
    0.001265542439063603,
    0.000835734644546107,
    0.000318579724580746,
    -0.000212653183490116,
    -0.000687044203214210,
    -0.001045192378203970,
    -0.001246307890160262,
    -0.001272432677940103,
    -0.001129425716907750,
    -0.000844797294892937,
    -0.000462881782404900,
    -0.000038150274869667,
    0.000372351073038558,
    0.000716408838645576,
    0.000952962453331239,
    0.001056611000192218,
    0.001019866746633974,
    0.000853035291692318,
    0.000581911777806535,
    0.000243742648939376,
    -0.000117916487516219,
    -0.000458730744403599,
    -0.000738799897838057,
    -0.000926952775265634,
    -0.001003685261621032,
    -0.000962510996013040,
    -0.000809708828030606,
    -0.000562646941659305,
    -0.000247017317721992,
    0.000106589241438445,
    0.000466304093914126,
    0.000802361759738747,
    0.001089882810057675,
    0.001310813201213376,
    0.001454903824191261,
    0.001519741581366084,
    0.001509953148215840,
    0.001435783630074849,
    0.001311296864337127,
    0.001152454785657775,
    0.000975304575250323,
    0.000794466626663634,
    0.000622018386430552,
    0.000466890457500183,
    0.000334591194217999,
    0.000227646032445337,
    0.000145468147843215,
    0.000086660616597102,
    0.000045443155025411,
    0.000023653198869943,
    0.000005299484859782,
)

_D_64_R_32 = (
    -0.000004403823942508,
    -0.000008963059919890,
    -0.000007276052892980,
    -0.000013448546764569,
    -0.000016407338246392,
    -0.000022821877811828,
    -0.000029059859493782,
    -0.000037502053326083,
    -0.000047050128769168,
    -0.000058647705667398,
    -0.000072066821233235,
    -0.000087775432302674,
    -0.000105848488644829,
    -0.000126598475702349,
    -0.000150205141042045,
    -0.000176926965601505,
    -0.000206973701715915,
    -0.000240575602493366,
    -0.000277937749971926,
    -0.000319260777052827,
    -0.000364722541989086,
    -0.000414482134953896,
    -0.000468670554403767,
    -0.000527388854339363,
    -0.000590701722925615,
    -0.000658633566464172,
    -0.000731163061150287,
    -0.000808218604975926,
    -0.000889673345622962,
    -0.000975340650633742,
    -0.001064969616730599,
    -0.001158240957389821,
    -0.001254763178484453,
    -0.001354069203096897,
    -0.001455613461052586,
    -0.001558769541846508,
    -0.001662828458596891,
    -0.001766997597152117,
    -0.001870400403116935,
    -0.001972076865069115,
    -0.002070984841172726,
    -0.002166002272448999,
    -0.002255930317598858,
    -0.002339497436442704,
    -0.002415364439683740,
    -0.002482130514177367,
    -0.002538340220525754,
    -0.002582491452580508,
    -0.002613044332960035,
    -0.002628431011812668,
    -0.002627066321370591,
    -0.002607359228695053,
    -0.002567725018271331,
    -0.002506598123060911,
    -0.002422445514576562,
    -0.002313780550524778,
    -0.002179177170034060,
    -0.002017284317828416,
    -0.001826840471286680,
    -0.001606688137875605,
    -0.001355788185007890,
    -0.001073233860638388,
    -0.000758264360902667,
    -0.000410277798843436,
    -0.000028843430628706,
    0.000386287004249912,
    0.000835168966487215,
    0.001317655958647924,
    0.001833391650175865,
    0.002381803404668191,
    0.002962097316406667,
    0.003573254853063226,
    0.004214031187543062,
    0.004882955288187807,
    0.005578331822331469,
    0.006298244909815173,
    0.007040563748502659,
    0.007802950114525442,
    0.008582867722817980,
    0.009377593413961051,
    0.010184230117287451,
    0.010999721518727896,
    0.011820868346749476,
    0.012644346170734195,
    0.013466724590201118,
    0.014284487677241258,
    0.015094055520281103,
    0.015891806704001060,
    0.016674101548252919,
    0.017437305919088521,
    0.018177815416425963,
    0.018892079736813970,
    0.019576627004361302,
    0.020228087861972253,
    0.020843219113185100,
    0.021418926707647539,
    0.021952287867040517,
    0.022440572154110033,
    0.022881261295670835,
    0.023272067580484536,
    0.023610950665041715,
    0.023896132633698622,
    0.024126111175283287,
    0.024299670755100852,
    0.024415891678976044,
    0.024474156966027200,
    0.024474156966027200,
    0.024415891678976044,
    0.024299670755100852,
    0.024126111175283287,
    0.023896132633698622,
    0.023610950665041715,
    0.023272067580484536,
    0.022881261295670835,
    0.022440572154110033,
    0.021952287867040517,
    0.021418926707647539,
    0.020843219113185100,
    0.020228087861972253,
    0.019576627004361302,
    0.018892079736813970,
    0.018177815416425963,
    0.017437305919088521,
    0.016674101548252919,
    0.015891806704001060,
    0.015094055520281103,
    0.014284487677241258,
    0.013466724590201118,
    0.012644346170734195,
    0.011820868346749476,
    0.010999721518727896,
    0.010184230117287451,
    0.009377593413961051,
    0.008582867722817980,
    0.007802950114525442,
    0.007040563748502659,
    0.006298244909815173,
    0.005578331822331469,
    0.004882955288187807,
    0.004214031187543062,
    0.003573254853063226,
    0.002962097316406667,
    0.002381803404668191,
    0.001833391650175865,
    0.001317655958647924,
    0.000835168966487215,
    0.000386287004249912,
    -0.000028843430628706,
    -0.000410277798843436,
    -0.000758264360902667,
    -0.001073233860638388,
    -0.001355788185007890,
    -0.001606688137875605,
    -0.001826840471286680,
    -0.002017284317828416,
    -0.002179177170034060,
    -0.002313780550524778,
    -0.002422445514576562,
    -0.002506598123060911,
    -0.002567725018271331,
    -0.002607359228695053,
    -0.002627066321370591,
    -0.002628431011812668,
    -0.002613044332960035,
    -0.002582491452580508,
    -0.002538340220525754,
    -0.002482130514177367,
    -0.002415364439683740,
    -0.002339497436442704,
    -0.002255930317598858,
    -0.002166002272448999,
    -0.002070984841172726,
    -0.001972076865069115,
    -0.001870400403116935,
    -0.001766997597152117,
    -0.001662828458596891,
    -0.001558769541846508,
    -0.001455613461052586,
    -0.001354069203096897,
    -0.001254763178484453,
    -0.001158240957389821,
    -0.001064969616730599,
    -0.000975340650633742,
    -0.000889673345622962,
    -0.000808218604975926,
    -0.000731163061150287,
    -0.000658633566464172,
    -0.000590701722925615,
    -0.000527388854339363,
    -0.000468670554403767,
    -0.000414482134953896,
    -0.000364722541989086,
    -0.000319260777052827,
    -0.000277937749971926,
    -0.000240575602493366,
    -0.000206973701715915,
    -0.000176926965601505,
    -0.000150205141042045,
    -0.000126598475702349,
    -0.000105848488644829,
    -0.000087775432302674,
    -0.000072066821233235,
    -0.000058647705667398,
    -0.000047050128769168,
    -0.000037502053326083,
    -0.000029059859493782,
    -0.000022821877811828,
    -0.000016407338246392,
    -0.000013448546764569,
    -0.000007276052892980,
    -0.000008963059919890,
    -0.000004403823942508,
)

_D_128_R_32 = (
    -0.000007703161797332,
    -0.000007067232655723,
    -0.000010206071983051,
    -0.000014172048980291,
    -0.000019092331824095,
    -0.000025093561850217,
    -0.000032309725460887,
    -0.000040869410108629,
    -0.000050902771287247,
    -0.000062527941809152,
    -0.000075857080877625,
    -0.000090981984892608,
    -0.000107979276021387,
    -0.000126895337525829,
    -0.000147750778600044,
    -0.000170524898241214,
    -0.000195159646270053,
    -0.000221543901544016,
    -0.000249517228886741,
    -0.000278854334896464,
    -0.000309268991706370,
    -0.000340399096744052,
    -0.000371811190567229,
    -0.000402986592324930,
    -0.000433326971103446,
    -0.000462142048725246,
    -0.000488656689255886,
    -0.000512000649038707,
    -0.000531217622524194,
    -0.000545257474301118,
    -0.000552987616398289,
    -0.000553188077307909,
    -0.000544565488882758,
    -0.000525751232639430,
    -0.000495318184744208,
    -0.000451782034515639,
    -0.000393620779029084,
    -0.000319279140356296,
    -0.000227190622760720,
    -0.000115784771504684,
    0.000016488581452787,
    0.000171149664304299,
    0.000349662890884785,
    0.000553425442457719,
    0.000783740497411292,
    0.001041804838025221,
    0.001328682064289453,
    0.001645290145967291,
    0.001992375608565783,
    0.002370502036550272,
    0.002780026279675712,
    0.003221088947286086,
    0.003693593686280741,
    0.004197200680900796,
    0.004731309996663634,
    0.005295059011515552,
    0.005887310701543637,
    0.006506655780921748,
    0.007151406625936390,
    0.007819604696828528,
    0.008509020566706571,
    0.009217166946123657,
    0.009941305011649831,
    0.010678463067957514,
    0.011425449071796635,
    0.012178874660574504,
    0.012935173457761552,
    0.013690629889370804,
    0.014441402554104810,
    0.015183556958199267,
    0.015913092956531424,
    0.016625980278750660,
    0.017318188813430120,
    0.017985725593062503,
    0.018624666516886546,
    0.019231193320663705,
    0.019801625228558870,
    0.020332454367773867,
    0.020820375812973399,
    0.021262319920613983,
    0.021655479285054610,
    0.021997336565315176,
    0.022285687008084795,
    0.022518660515178174,
    0.022694738600454345,
    0.022812769691468757,
    0.022871979661449618,
    0.022871979661449618,
    0.022812769691468757,
    0.022694738600454345,
    0.022518660515178174,
    0.022285687008084795,
    0.021997336565315176,
    0.021655479285054610,
    0.021262319920613983,
    0.020820375812973399,
    0.020332454367773867,
    0.019801625228558870,
    0.019231193320663705,
    0.018624666516886546,
    0.017985725593062503,
    0.017318188813430120,
    0.016625980278750660,
    0.015913092956531424,
    0.015183556958199267,
    0.014441402554104810,
    0.013690629889370804,
    0.012935173457761552,
    0.012178874660574504,
    0.011425449071796635,
    0.010678463067957514,
    0.009941305011649831,
    0.009217166946123657,
    0.008509020566706571,
    0.007819604696828528,
    0.007151406625936390,
    0.006506655780921748,
    0.005887310701543637,
    0.005295059011515552,
    0.004731309996663634,
    0.004197200680900796,
    0.003693593686280741,
    0.003221088947286086,
    0.002780026279675712,
    0.002370502036550272,
    0.001992375608565783,
    0.001645290145967291,
    0.001328682064289453,
    0.001041804838025221,
    0.000783740497411292,
    0.000553425442457719,
    0.000349662890884785,
    0.000171149664304299,
    0.000016488581452787,
    -0.000115784771504684,
    -0.000227190622760720,
    -0.000319279140356296,
    -0.000393620779029084,
    -0.000451782034515639,
    -0.000495318184744208,
    -0.000525751232639430,
    -0.000544565488882758,
    -0.000553188077307909,
    -0.000552987616398289,
    -0.000545257474301118,
    -0.000531217622524194,
    -0.000512000649038707,
    -0.000488656689255886,
    -0.000462142048725246,
    -0.000433326971103446,
    -0.000402986592324930,
    -0.000371811190567229,
    -0.000340399096744052,
    -0.000309268991706370,
    -0.000278854334896464,
    -0.000249517228886741,
    -0.000221543901544016,
    -0.000195159646270053,
    -0.000170524898241214,
    -0.000147750778600044,
    -0.000126895337525829,
    -0.000107979276021387,
    -0.000090981984892608,
    -0.000075857080877625,
    -0.000062527941809152,
    -0.000050902771287247,
    -0.000040869410108629,
    -0.000032309725460887,
    -0.000025093561850217,
    -0.000019092331824095,
    -0.000014172048980291,
    -0.000010206071983051,
    -0.000007067232655723,
    -0.000007703161797332,
)

_D_256_R_64 = (
    -0.000006032200297229,
    -0.000002790586794678,
    -0.000003423524464373,
    -0.000004141892670381,
    -0.000004959329780957,
    -0.000005880953015414,
    -0.000006916263845337,
    -0.000008064028056128,
    -0.000009336504822940,
    -0.000010742797132820,
    -0.000012302324525658,
    -0.000014003128525449,
    -0.000015868003792231,
    -0.000017906061357310,
    -0.000020111369902626,
    -0.000022508204619172,
    -0.000025093613992638,
    -0.000027881953296601,
    -0.000030875236885189,
    -0.000034086060833210,
    -0.000037517497377010,
    -0.000041176665997414,
    -0.000045067469478981,
    -0.000049199353227621,
    -0.000053568215176887,
    -0.000058185242147041,
    -0.000063047547807853,
    -0.000068158618146586,
    -0.000073517650784389,
    -0.000079124725926570,
    -0.000084976788235246,
    -0.000091070103041806,
    -0.000097399649098627,
    -0.000103959504668590,
    -0.000110738977492950,
    -0.000117729935644196,
    -0.000124919754739577,
    -0.000132293212128623,
    -0.000139836270835869,
    -0.000147529334756596,
    -0.000155353239032747,
    -0.000163284378055491,
    -0.000171298895948762,
    -0.000179368841745378,
    -0.000187464129074148,
    -0.000195552549576070,
    -0.000203599379753965,
    -0.000211565351775375,
    -0.000219411598860001,
    -0.000227093646507866,
    -0.000234565855614429,
    -0.000241779257421431,
    -0.000248682177854843,
    -0.000255220180724547,
    -0.000261335292980978,
    -0.000266967862740791,
    -0.000272054419087176,
    -0.000276528686849870,
    -0.000280322370041046,
    -0.000283363923695878,
    -0.000285578633373008,
    -0.000286890694598539,
    -0.000287220112764771,
    -0.000286486063219693,
    -0.000284603980740463,
    -0.000281488659987540,
    -0.000277051522643753,
    -0.000271202733437524,
    -0.000263850662609383,
    -0.000254902132867105,
    -0.000244261829079865,
    -0.000231834561467387,
    -0.000217522684614226,
    -0.000201228717970838,
    -0.000182854056621652,
    -0.000162300101972573,
    -0.000139467943568298,
    -0.000114258627064630,
    -0.000086574168670878,
    -0.000056316612617103,
    -0.000023389083735015,
    0.000012303734435184,
    0.000050856088211618,
    0.000092360432854175,
    0.000136906695012963,
    0.000184583050199368,
    0.000235474395169584,
    0.000289663252276950,
    0.000347228091667187,
    0.000408244468331575,
    0.000472783700962668,
    0.000540912739938505,
    0.000612694289527581,
    0.000688186201030564,
    0.000767440808596336,
    0.000850505496981770,
    0.000937421598757782,
    0.001028224584686942,
    0.001122943571650730,
    0.001221601170177604,
    0.001324213422447449,
    0.001430788817328081,
    0.001541329271676986,
    0.001655828820474164,
    0.001774273932442011,
    0.001896643321221287,
    0.002022907760579356,
    0.002153029565104709,
    0.002286963138555204,
    0.002424654105591249,
    0.002566039990527927,
    0.002711049190015392,
    0.002859602052878106,
    0.003011609882021581,
    0.003166975340851216,
    0.003325592606007947,
    0.003487347156138999,
    0.003652115769225347,
    0.003819766988190932,
    0.003990160791661657,
    0.004163149004759460,
    0.004338575232032592,
    0.004516275281704776,
    0.004696077226065694,
    0.004877801369702575,
    0.005061261175365414,
    0.005246262760259225,
    0.005432605634097002,
    0.005620082968897619,
    0.005808481837004595,
    0.005997583515661679,
    0.006187164045980849,
    0.006376994441064236,
    0.006566841257680600,
    0.006756466702660143,
    0.006945629644096785,
    0.007134085474240178,
    0.007321586857189369,
    0.007507884388699728,
    0.007692726710717013,
    0.007875861286146892,
    0.008057034853723447,
    0.008235993962285608,
    0.008412485423992495,
    0.008586256905270668,
    0.008757057550423931,
    0.008924638381879985,
    0.009088752763977616,
    0.009249157391806035,
    0.009405612190690901,
    0.009557881349450560,
    0.009705733651032743,
    0.009848943025250930,
    0.009987289003226731,
    0.010120557317645952,
    0.010248540384643352,
    0.010371037696321509,
    0.010487856281889540,
    0.010598811426250850,
    0.010703726661456589,
    0.010802434494593470,
    0.010894776824678817,
    0.010980605060844476,
    0.011059780725514858,
    0.011132175645830765,
    0.011197672374601442,
    0.011256164283833567,
    0.011307555970121824,
    0.011351763540287503,
    0.011388714558166329,
    0.011418348423280301,
    0.011440616600089638,
    0.011455482402780947,
    0.011462921415360990,
    0.011462921415360990,
    0.011455482402780947,
    0.011440616600089638,
    0.011418348423280301,
    0.011388714558166329,
    0.011351763540287503,
    0.011307555970121824,
    0.011256164283833567,
    0.011197672374601442,
    0.011132175645830765,
    0.011059780725514858,
    0.010980605060844476,
    0.010894776824678817,
    0.010802434494593470,
    0.010703726661456589,
    0.010598811426250850,
    0.010487856281889540,
    0.010371037696321509,
    0.010248540384643352,
    0.010120557317645952,
    0.009987289003226731,
    0.009848943025250930,
    0.009705733651032743,
    0.009557881349450560,
    0.009405612190690901,
    0.009249157391806035,
    0.009088752763977616,
    0.008924638381879985,
    0.008757057550423931,
    0.008586256905270668,
    0.008412485423992495,
    0.008235993962285608,
    0.008057034853723447,
    0.007875861286146892,
    0.007692726710717013,
    0.007507884388699728,
    0.007321586857189369,
    0.007134085474240178,
    0.006945629644096785,
    0.006756466702660143,
    0.006566841257680600,
    0.006376994441064236,
    0.006187164045980849,
    0.005997583515661679,
    0.005808481837004595,
    0.005620082968897619,
    0.005432605634097002,
    0.005246262760259225,
    0.005061261175365414,
    0.004877801369702575,
    0.004696077226065694,
    0.004516275281704776,
    0.004338575232032592,
    0.004163149004759460,
    0.003990160791661657,
    0.003819766988190932,
    0.003652115769225347,
    0.003487347156138999,
    0.003325592606007947,
    0.003166975340851216,
    0.003011609882021581,
    0.002859602052878106,
    0.002711049190015392,
    0.002566039990527927,
    0.002424654105591249,
    0.002286963138555204,
    0.002153029565104709,
    0.002022907760579356,
    0.001896643321221287,
    0.001774273932442011,
    0.001655828820474164,
    0.001541329271676986,
    0.001430788817328081,
    0.001324213422447449,
    0.001221601170177604,
    0.001122943571650730,
    0.001028224584686942,
    0.000937421598757782,
    0.000850505496981770,
    0.000767440808596336,
    0.000688186201030564,
    0.000612694289527581,
    0.000540912739938505,
    0.000472783700962668,
    0.000408244468331575,
    0.000347228091667187,
    0.000289663252276950,
    0.000235474395169584,
    0.000184583050199368,
    0.000136906695012963,
    0.000092360432854175,
    0.000050856088211618,
    0.000012303734435184,
    -0.000023389083735015,
    -0.000056316612617103,
    -0.000086574168670878,
    -0.000114258627064630,
    -0.000139467943568298,
    -0.000162300101972573,
    -0.000182854056621652,
    -0.000201228717970838,
    -0.000217522684614226,
    -0.000231834561467387,
    -0.000244261829079865,
    -0.000254902132867105,
    -0.000263850662609383,
    -0.000271202733437524,
    -0.000277051522643753,
    -0.000281488659987540,
    -0.000284603980740463,
    -0.000286486063219693,
    -0.000287220112764771,
    -0.000286890694598539,
    -0.000285578633373008,
    -0.000283363923695878,
    -0.000280322370041046,
    -0.000276528686849870,
    -0.000272054419087176,
    -0.000266967862740791,
    -0.000261335292980978,
    -0.000255220180724547,
    -0.000248682177854843,
    -0.000241779257421431,
    -0.000234565855614429,
    -0.000227093646507866,
    -0.000219411598860001,
    -0.000211565351775375,
    -0.000203599379753965,
    -0.000195552549576070,
    -0.000187464129074148,
    -0.000179368841745378,
    -0.000171298895948762,
    -0.000163284378055491,
    -0.000155353239032747,
    -0.000147529334756596,
    -0.000139836270835869,
    -0.000132293212128623,
    -0.000124919754739577,
    -0.000117729935644196,
    -0.000110738977492950,
    -0.000103959504668590,
    -0.000097399649098627,
    -0.000091070103041806,
    -0.000084976788235246,
    -0.000079124725926570,
    -0.000073517650784389,
    -0.000068158618146586,
    -0.000063047547807853,
    -0.000058185242147041,
    -0.000053568215176887,
    -0.000049199353227621,
    -0.000045067469478981,
    -0.000041176665997414,
    -0.000037517497377010,
    -0.000034086060833210,
    -0.000030875236885189,
    -0.000027881953296601,
    -0.000025093613992638,
    -0.000022508204619172,
    -0.000020111369902626,
    -0.000017906061357310,
    -0.000015868003792231,
    -0.000014003128525449,
    -0.000012302324525658,
    -0.000010742797132820,
    -0.000009336504822940,
    -0.000008064028056128,
    -0.000006916263845337,
    -0.000005880953015414,
    -0.000004959329780957,
    -0.000004141892670381,
    -0.000003423524464373,
    -0.000002790586794678,
    -0.000006032200297229,
)

_KERNELS = {
    "d_8_r_8": _D_8_R_8,
    "d_64_r_32": _D_64_R_32,
    "d_128_r_32": _D_128_R_32,
    "d_256_r_64": _D_256_R_64,
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