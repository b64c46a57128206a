"""Reference table of all 960 starting arrangements, indexed by identifier.

The encoder and decoder never read this table; it exists for cross-checking.
"""

from __future__ import annotations

from typing import Final

from chess960.core.arrangement import Arrangement
from chess960.core.validation import coerce_pieces, is_valid_id

# fmt: off
POSITIONS: Final = (
    "BBQNNRKR", "BQNBNRKR", "BQNNRBKR", "BQNNRKRB", "QBBNNRKR", "QNBBNRKR",  # 0
    "QNBNRBKR", "QNBNRKRB", "QBNNBRKR", "QNNBBRKR", "QNNRBBKR", "QNNRBKRB",  # 6
    "QBNNRKBR", "QNNBRKBR", "QNNRKBBR", "QNNRKRBB", "BBNQNRKR", "BNQBNRKR",  # 12
    "BNQNRBKR", "BNQNRKRB", "NBBQNRKR", "NQBBNRKR", "NQBNRBKR", "NQBNRKRB",  # 18
    "NBQNBRKR", "NQNBBRKR", "NQNRBBKR", "NQNRBKRB", "NBQNRKBR", "NQNBRKBR",  # 24
    "NQNRKBBR", "NQNRKRBB", "BBNNQRKR", "BNNBQRKR", "BNNQRBKR", "BNNQRKRB",  # 30
    "NBBNQRKR", "NNBBQRKR", "NNBQRBKR", "NNBQRKRB", "NBNQBRKR", "NNQBBRKR",  # 36
    "NNQRBBKR", "NNQRBKRB", "NBNQRKBR", "NNQBRKBR", "NNQRKBBR", "NNQRKRBB",  # 42
    "BBNNRQKR", "BNNBRQKR", "BNNRQBKR", "BNNRQKRB", "NBBNRQKR", "NNBBRQKR",  # 48
    "NNBRQBKR", "NNBRQKRB", "NBNRBQKR", "NNRBBQKR", "NNRQBBKR", "NNRQBKRB",  # 54
    "NBNRQKBR", "NNRBQKBR", "NNRQKBBR", "NNRQKRBB", "BBNNRKQR", "BNNBRKQR",  # 60
    "BNNRKBQR", "BNNRKQRB", "NBBNRKQR", "NNBBRKQR", "NNBRKBQR", "NNBRKQRB",  # 66
    "NBNRBKQR", "NNRBBKQR", "NNRKBBQR", "NNRKBQRB", "NBNRKQBR", "NNRBKQBR",  # 72
    "NNRKQBBR", "NNRKQRBB", "BBNNRKRQ", "BNNBRKRQ", "BNNRKBRQ", "BNNRKRQB",  # 78
    "NBBNRKRQ", "NNBBRKRQ", "NNBRKBRQ", "NNBRKRQB", "NBNRBKRQ", "NNRBBKRQ",  # 84
    "NNRKBBRQ", "NNRKBRQB", "NBNRKRBQ", "NNRBKRBQ", "NNRKRBBQ", "NNRKRQBB",  # 90
    "BBQNRNKR", "BQNBRNKR", "BQNRNBKR", "BQNRNKRB", "QBBNRNKR", "QNBBRNKR",  # 96
    "QNBRNBKR", "QNBRNKRB", "QBNRBNKR", "QNRBBNKR", "QNRNBBKR", "QNRNBKRB",  # 102
    "QBNRNKBR", "QNRBNKBR", "QNRNKBBR", "QNRNKRBB", "BBNQRNKR", "BNQBRNKR",  # 108
    "BNQRNBKR", "BNQRNKRB", "NBBQRNKR", "NQBBRNKR", "NQBRNBKR", "NQBRNKRB",  # 114
    "NBQRBNKR", "NQRBBNKR", "NQRNBBKR", "NQRNBKRB", "NBQRNKBR", "NQRBNKBR",  # 120
    "NQRNKBBR", "NQRNKRBB", "BBNRQNKR", "BNRBQNKR", "BNRQNBKR", "BNRQNKRB",  # 126
    "NBBRQNKR", "NRBBQNKR", "NRBQNBKR", "NRBQNKRB", "NBRQBNKR", "NRQBBNKR",  # 132
    "NRQNBBKR", "NRQNBKRB", "NBRQNKBR", "NRQBNKBR", "NRQNKBBR", "NRQNKRBB",  # 138
    "BBNRNQKR", "BNRBNQKR", "BNRNQBKR", "BNRNQKRB", "NBBRNQKR", "NRBBNQKR",  # 144
    "NRBNQBKR", "NRBNQKRB", "NBRNBQKR", "NRNBBQKR", "NRNQBBKR", "NRNQBKRB",  # 150
    "NBRNQKBR", "NRNBQKBR", "NRNQKBBR", "NRNQKRBB", "BBNRNKQR", "BNRBNKQR",  # 156
    "BNRNKBQR", "BNRNKQRB", "NBBRNKQR", "NRBBNKQR", "NRBNKBQR", "NRBNKQRB",  # 162
    "NBRNBKQR", "NRNBBKQR", "NRNKBBQR", "NRNKBQRB", "NBRNKQBR", "NRNBKQBR",  # 168
    "NRNKQBBR", "NRNKQRBB", "BBNRNKRQ", "BNRBNKRQ", "BNRNKBRQ", "BNRNKRQB",  # 174
    "NBBRNKRQ", "NRBBNKRQ", "NRBNKBRQ", "NRBNKRQB", "NBRNBKRQ", "NRNBBKRQ",  # 180
    "NRNKBBRQ", "NRNKBRQB", "NBRNKRBQ", "NRNBKRBQ", "NRNKRBBQ", "NRNKRQBB",  # 186
    "BBQNRKNR", "BQNBRKNR", "BQNRKBNR", "BQNRKNRB", "QBBNRKNR", "QNBBRKNR",  # 192
    "QNBRKBNR", "QNBRKNRB", "QBNRBKNR", "QNRBBKNR", "QNRKBBNR", "QNRKBNRB",  # 198
    "QBNRKNBR", "QNRBKNBR", "QNRKNBBR", "QNRKNRBB", "BBNQRKNR", "BNQBRKNR",  # 204
    "BNQRKBNR", "BNQRKNRB", "NBBQRKNR", "NQBBRKNR", "NQBRKBNR", "NQBRKNRB",  # 210
    "NBQRBKNR", "NQRBBKNR", "NQRKBBNR", "NQRKBNRB", "NBQRKNBR", "NQRBKNBR",  # 216
    "NQRKNBBR", "NQRKNRBB", "BBNRQKNR", "BNRBQKNR", "BNRQKBNR", "BNRQKNRB",  # 222
    "NBBRQKNR", "NRBBQKNR", "NRBQKBNR", "NRBQKNRB", "NBRQBKNR", "NRQBBKNR",  # 228
    "NRQKBBNR", "NRQKBNRB", "NBRQKNBR", "NRQBKNBR", "NRQKNBBR", "NRQKNRBB",  # 234
    "BBNRKQNR", "BNRBKQNR", "BNRKQBNR", "BNRKQNRB", "NBBRKQNR", "NRBBKQNR",  # 240
    "NRBKQBNR", "NRBKQNRB", "NBRKBQNR", "NRKBBQNR", "NRKQBBNR", "NRKQBNRB",  # 246
    "NBRKQNBR", "NRKBQNBR", "NRKQNBBR", "NRKQNRBB", "BBNRKNQR", "BNRBKNQR",  # 252
    "BNRKNBQR", "BNRKNQRB", "NBBRKNQR", "NRBBKNQR", "NRBKNBQR", "NRBKNQRB",  # 258
    "NBRKBNQR", "NRKBBNQR", "NRKNBBQR", "NRKNBQRB", "NBRKNQBR", "NRKBNQBR",  # 264
    "NRKNQBBR", "NRKNQRBB", "BBNRKNRQ", "BNRBKNRQ", "BNRKNBRQ", "BNRKNRQB",  # 270
    "NBBRKNRQ", "NRBBKNRQ", "NRBKNBRQ", "NRBKNRQB", "NBRKBNRQ", "NRKBBNRQ",  # 276
    "NRKNBBRQ", "NRKNBRQB", "NBRKNRBQ", "NRKBNRBQ", "NRKNRBBQ", "NRKNRQBB",  # 282
    "BBQNRKRN", "BQNBRKRN", "BQNRKBRN", "BQNRKRNB", "QBBNRKRN", "QNBBRKRN",  # 288
    "QNBRKBRN", "QNBRKRNB", "QBNRBKRN", "QNRBBKRN", "QNRKBBRN", "QNRKBRNB",  # 294
    "QBNRKRBN", "QNRBKRBN", "QNRKRBBN", "QNRKRNBB", "BBNQRKRN", "BNQBRKRN",  # 300
    "BNQRKBRN", "BNQRKRNB", "NBBQRKRN", "NQBBRKRN", "NQBRKBRN", "NQBRKRNB",  # 306
    "NBQRBKRN", "NQRBBKRN", "NQRKBBRN", "NQRKBRNB", "NBQRKRBN", "NQRBKRBN",  # 312
    "NQRKRBBN", "NQRKRNBB", "BBNRQKRN", "BNRBQKRN", "BNRQKBRN", "BNRQKRNB",  # 318
    "NBBRQKRN", "NRBBQKRN", "NRBQKBRN", "NRBQKRNB", "NBRQBKRN", "NRQBBKRN",  # 324
    "NRQKBBRN", "NRQKBRNB", "NBRQKRBN", "NRQBKRBN", "NRQKRBBN", "NRQKRNBB",  # 330
    "BBNRKQRN", "BNRBKQRN", "BNRKQBRN", "BNRKQRNB", "NBBRKQRN", "NRBBKQRN",  # 336
    "NRBKQBRN", "NRBKQRNB", "NBRKBQRN", "NRKBBQRN", "NRKQBBRN", "NRKQBRNB",  # 342
    "NBRKQRBN", "NRKBQRBN", "NRKQRBBN", "NRKQRNBB", "BBNRKRQN", "BNRBKRQN",  # 348
    "BNRKRBQN", "BNRKRQNB", "NBBRKRQN", "NRBBKRQN", "NRBKRBQN", "NRBKRQNB",  # 354
    "NBRKBRQN", "NRKBBRQN", "NRKRBBQN", "NRKRBQNB", "NBRKRQBN", "NRKBRQBN",  # 360
    "NRKRQBBN", "NRKRQNBB", "BBNRKRNQ", "BNRBKRNQ", "BNRKRBNQ", "BNRKRNQB",  # 366
    "NBBRKRNQ", "NRBBKRNQ", "NRBKRBNQ", "NRBKRNQB", "NBRKBRNQ", "NRKBBRNQ",  # 372
    "NRKRBBNQ", "NRKRBNQB", "NBRKRNBQ", "NRKBRNBQ", "NRKRNBBQ", "NRKRNQBB",  # 378
    "BBQRNNKR", "BQRBNNKR", "BQRNNBKR", "BQRNNKRB", "QBBRNNKR", "QRBBNNKR",  # 384
    "QRBNNBKR", "QRBNNKRB", "QBRNBNKR", "QRNBBNKR", "QRNNBBKR", "QRNNBKRB",  # 390
    "QBRNNKBR", "QRNBNKBR", "QRNNKBBR", "QRNNKRBB", "BBRQNNKR", "BRQBNNKR",  # 396
    "BRQNNBKR", "BRQNNKRB", "RBBQNNKR", "RQBBNNKR", "RQBNNBKR", "RQBNNKRB",  # 402
    "RBQNBNKR", "RQNBBNKR", "RQNNBBKR", "RQNNBKRB", "RBQNNKBR", "RQNBNKBR",  # 408
    "RQNNKBBR", "RQNNKRBB", "BBRNQNKR", "BRNBQNKR", "BRNQNBKR", "BRNQNKRB",  # 414
    "RBBNQNKR", "RNBBQNKR", "RNBQNBKR", "RNBQNKRB", "RBNQBNKR", "RNQBBNKR",  # 420
    "RNQNBBKR", "RNQNBKRB", "RBNQNKBR", "RNQBNKBR", "RNQNKBBR", "RNQNKRBB",  # 426
    "BBRNNQKR", "BRNBNQKR", "BRNNQBKR", "BRNNQKRB", "RBBNNQKR", "RNBBNQKR",  # 432
    "RNBNQBKR", "RNBNQKRB", "RBNNBQKR", "RNNBBQKR", "RNNQBBKR", "RNNQBKRB",  # 438
    "RBNNQKBR", "RNNBQKBR", "RNNQKBBR", "RNNQKRBB", "BBRNNKQR", "BRNBNKQR",  # 444
    "BRNNKBQR", "BRNNKQRB", "RBBNNKQR", "RNBBNKQR", "RNBNKBQR", "RNBNKQRB",  # 450
    "RBNNBKQR", "RNNBBKQR", "RNNKBBQR", "RNNKBQRB", "RBNNKQBR", "RNNBKQBR",  # 456
    "RNNKQBBR", "RNNKQRBB", "BBRNNKRQ", "BRNBNKRQ", "BRNNKBRQ", "BRNNKRQB",  # 462
    "RBBNNKRQ", "RNBBNKRQ", "RNBNKBRQ", "RNBNKRQB", "RBNNBKRQ", "RNNBBKRQ",  # 468
    "RNNKBBRQ", "RNNKBRQB", "RBNNKRBQ", "RNNBKRBQ", "RNNKRBBQ", "RNNKRQBB",  # 474
    "BBQRNKNR", "BQRBNKNR", "BQRNKBNR", "BQRNKNRB", "QBBRNKNR", "QRBBNKNR",  # 480
    "QRBNKBNR", "QRBNKNRB", "QBRNBKNR", "QRNBBKNR", "QRNKBBNR", "QRNKBNRB",  # 486
    "QBRNKNBR", "QRNBKNBR", "QRNKNBBR", "QRNKNRBB", "BBRQNKNR", "BRQBNKNR",  # 492
    "BRQNKBNR", "BRQNKNRB", "RBBQNKNR", "RQBBNKNR", "RQBNKBNR", "RQBNKNRB",  # 498
    "RBQNBKNR", "RQNBBKNR", "RQNKBBNR", "RQNKBNRB", "RBQNKNBR", "RQNBKNBR",  # 504
    "RQNKNBBR", "RQNKNRBB", "BBRNQKNR", "BRNBQKNR", "BRNQKBNR", "BRNQKNRB",  # 510
    "RBBNQKNR", "RNBBQKNR", "RNBQKBNR", "RNBQKNRB", "RBNQBKNR", "RNQBBKNR",  # 516
    "RNQKBBNR", "RNQKBNRB", "RBNQKNBR", "RNQBKNBR", "RNQKNBBR", "RNQKNRBB",  # 522
    "BBRNKQNR", "BRNBKQNR", "BRNKQBNR", "BRNKQNRB", "RBBNKQNR", "RNBBKQNR",  # 528
    "RNBKQBNR", "RNBKQNRB", "RBNKBQNR", "RNKBBQNR", "RNKQBBNR", "RNKQBNRB",  # 534
    "RBNKQNBR", "RNKBQNBR", "RNKQNBBR", "RNKQNRBB", "BBRNKNQR", "BRNBKNQR",  # 540
    "BRNKNBQR", "BRNKNQRB", "RBBNKNQR", "RNBBKNQR", "RNBKNBQR", "RNBKNQRB",  # 546
    "RBNKBNQR", "RNKBBNQR", "RNKNBBQR", "RNKNBQRB", "RBNKNQBR", "RNKBNQBR",  # 552
    "RNKNQBBR", "RNKNQRBB", "BBRNKNRQ", "BRNBKNRQ", "BRNKNBRQ", "BRNKNRQB",  # 558
    "RBBNKNRQ", "RNBBKNRQ", "RNBKNBRQ", "RNBKNRQB", "RBNKBNRQ", "RNKBBNRQ",  # 564
    "RNKNBBRQ", "RNKNBRQB", "RBNKNRBQ", "RNKBNRBQ", "RNKNRBBQ", "RNKNRQBB",  # 570
    "BBQRNKRN", "BQRBNKRN", "BQRNKBRN", "BQRNKRNB", "QBBRNKRN", "QRBBNKRN",  # 576
    "QRBNKBRN", "QRBNKRNB", "QBRNBKRN", "QRNBBKRN", "QRNKBBRN", "QRNKBRNB",  # 582
    "QBRNKRBN", "QRNBKRBN", "QRNKRBBN", "QRNKRNBB", "BBRQNKRN", "BRQBNKRN",  # 588
    "BRQNKBRN", "BRQNKRNB", "RBBQNKRN", "RQBBNKRN", "RQBNKBRN", "RQBNKRNB",  # 594
    "RBQNBKRN", "RQNBBKRN", "RQNKBBRN", "RQNKBRNB", "RBQNKRBN", "RQNBKRBN",  # 600
    "RQNKRBBN", "RQNKRNBB", "BBRNQKRN", "BRNBQKRN", "BRNQKBRN", "BRNQKRNB",  # 606
    "RBBNQKRN", "RNBBQKRN", "RNBQKBRN", "RNBQKRNB", "RBNQBKRN", "RNQBBKRN",  # 612
    "RNQKBBRN", "RNQKBRNB", "RBNQKRBN", "RNQBKRBN", "RNQKRBBN", "RNQKRNBB",  # 618
    "BBRNKQRN", "BRNBKQRN", "BRNKQBRN", "BRNKQRNB", "RBBNKQRN", "RNBBKQRN",  # 624
    "RNBKQBRN", "RNBKQRNB", "RBNKBQRN", "RNKBBQRN", "RNKQBBRN", "RNKQBRNB",  # 630
    "RBNKQRBN", "RNKBQRBN", "RNKQRBBN", "RNKQRNBB", "BBRNKRQN", "BRNBKRQN",  # 636
    "BRNKRBQN", "BRNKRQNB", "RBBNKRQN", "RNBBKRQN", "RNBKRBQN", "RNBKRQNB",  # 642
    "RBNKBRQN", "RNKBBRQN", "RNKRBBQN", "RNKRBQNB", "RBNKRQBN", "RNKBRQBN",  # 648
    "RNKRQBBN", "RNKRQNBB", "BBRNKRNQ", "BRNBKRNQ", "BRNKRBNQ", "BRNKRNQB",  # 654
    "RBBNKRNQ", "RNBBKRNQ", "RNBKRBNQ", "RNBKRNQB", "RBNKBRNQ", "RNKBBRNQ",  # 660
    "RNKRBBNQ", "RNKRBNQB", "RBNKRNBQ", "RNKBRNBQ", "RNKRNBBQ", "RNKRNQBB",  # 666
    "BBQRKNNR", "BQRBKNNR", "BQRKNBNR", "BQRKNNRB", "QBBRKNNR", "QRBBKNNR",  # 672
    "QRBKNBNR", "QRBKNNRB", "QBRKBNNR", "QRKBBNNR", "QRKNBBNR", "QRKNBNRB",  # 678
    "QBRKNNBR", "QRKBNNBR", "QRKNNBBR", "QRKNNRBB", "BBRQKNNR", "BRQBKNNR",  # 684
    "BRQKNBNR", "BRQKNNRB", "RBBQKNNR", "RQBBKNNR", "RQBKNBNR", "RQBKNNRB",  # 690
    "RBQKBNNR", "RQKBBNNR", "RQKNBBNR", "RQKNBNRB", "RBQKNNBR", "RQKBNNBR",  # 696
    "RQKNNBBR", "RQKNNRBB", "BBRKQNNR", "BRKBQNNR", "BRKQNBNR", "BRKQNNRB",  # 702
    "RBBKQNNR", "RKBBQNNR", "RKBQNBNR", "RKBQNNRB", "RBKQBNNR", "RKQBBNNR",  # 708
    "RKQNBBNR", "RKQNBNRB", "RBKQNNBR", "RKQBNNBR", "RKQNNBBR", "RKQNNRBB",  # 714
    "BBRKNQNR", "BRKBNQNR", "BRKNQBNR", "BRKNQNRB", "RBBKNQNR", "RKBBNQNR",  # 720
    "RKBNQBNR", "RKBNQNRB", "RBKNBQNR", "RKNBBQNR", "RKNQBBNR", "RKNQBNRB",  # 726
    "RBKNQNBR", "RKNBQNBR", "RKNQNBBR", "RKNQNRBB", "BBRKNNQR", "BRKBNNQR",  # 732
    "BRKNNBQR", "BRKNNQRB", "RBBKNNQR", "RKBBNNQR", "RKBNNBQR", "RKBNNQRB",  # 738
    "RBKNBNQR", "RKNBBNQR", "RKNNBBQR", "RKNNBQRB", "RBKNNQBR", "RKNBNQBR",  # 744
    "RKNNQBBR", "RKNNQRBB", "BBRKNNRQ", "BRKBNNRQ", "BRKNNBRQ", "BRKNNRQB",  # 750
    "RBBKNNRQ", "RKBBNNRQ", "RKBNNBRQ", "RKBNNRQB", "RBKNBNRQ", "RKNBBNRQ",  # 756
    "RKNNBBRQ", "RKNNBRQB", "RBKNNRBQ", "RKNBNRBQ", "RKNNRBBQ", "RKNNRQBB",  # 762
    "BBQRKNRN", "BQRBKNRN", "BQRKNBRN", "BQRKNRNB", "QBBRKNRN", "QRBBKNRN",  # 768
    "QRBKNBRN", "QRBKNRNB", "QBRKBNRN", "QRKBBNRN", "QRKNBBRN", "QRKNBRNB",  # 774
    "QBRKNRBN", "QRKBNRBN", "QRKNRBBN", "QRKNRNBB", "BBRQKNRN", "BRQBKNRN",  # 780
    "BRQKNBRN", "BRQKNRNB", "RBBQKNRN", "RQBBKNRN", "RQBKNBRN", "RQBKNRNB",  # 786
    "RBQKBNRN", "RQKBBNRN", "RQKNBBRN", "RQKNBRNB", "RBQKNRBN", "RQKBNRBN",  # 792
    "RQKNRBBN", "RQKNRNBB", "BBRKQNRN", "BRKBQNRN", "BRKQNBRN", "BRKQNRNB",  # 798
    "RBBKQNRN", "RKBBQNRN", "RKBQNBRN", "RKBQNRNB", "RBKQBNRN", "RKQBBNRN",  # 804
    "RKQNBBRN", "RKQNBRNB", "RBKQNRBN", "RKQBNRBN", "RKQNRBBN", "RKQNRNBB",  # 810
    "BBRKNQRN", "BRKBNQRN", "BRKNQBRN", "BRKNQRNB", "RBBKNQRN", "RKBBNQRN",  # 816
    "RKBNQBRN", "RKBNQRNB", "RBKNBQRN", "RKNBBQRN", "RKNQBBRN", "RKNQBRNB",  # 822
    "RBKNQRBN", "RKNBQRBN", "RKNQRBBN", "RKNQRNBB", "BBRKNRQN", "BRKBNRQN",  # 828
    "BRKNRBQN", "BRKNRQNB", "RBBKNRQN", "RKBBNRQN", "RKBNRBQN", "RKBNRQNB",  # 834
    "RBKNBRQN", "RKNBBRQN", "RKNRBBQN", "RKNRBQNB", "RBKNRQBN", "RKNBRQBN",  # 840
    "RKNRQBBN", "RKNRQNBB", "BBRKNRNQ", "BRKBNRNQ", "BRKNRBNQ", "BRKNRNQB",  # 846
    "RBBKNRNQ", "RKBBNRNQ", "RKBNRBNQ", "RKBNRNQB", "RBKNBRNQ", "RKNBBRNQ",  # 852
    "RKNRBBNQ", "RKNRBNQB", "RBKNRNBQ", "RKNBRNBQ", "RKNRNBBQ", "RKNRNQBB",  # 858
    "BBQRKRNN", "BQRBKRNN", "BQRKRBNN", "BQRKRNNB", "QBBRKRNN", "QRBBKRNN",  # 864
    "QRBKRBNN", "QRBKRNNB", "QBRKBRNN", "QRKBBRNN", "QRKRBBNN", "QRKRBNNB",  # 870
    "QBRKRNBN", "QRKBRNBN", "QRKRNBBN", "QRKRNNBB", "BBRQKRNN", "BRQBKRNN",  # 876
    "BRQKRBNN", "BRQKRNNB", "RBBQKRNN", "RQBBKRNN", "RQBKRBNN", "RQBKRNNB",  # 882
    "RBQKBRNN", "RQKBBRNN", "RQKRBBNN", "RQKRBNNB", "RBQKRNBN", "RQKBRNBN",  # 888
    "RQKRNBBN", "RQKRNNBB", "BBRKQRNN", "BRKBQRNN", "BRKQRBNN", "BRKQRNNB",  # 894
    "RBBKQRNN", "RKBBQRNN", "RKBQRBNN", "RKBQRNNB", "RBKQBRNN", "RKQBBRNN",  # 900
    "RKQRBBNN", "RKQRBNNB", "RBKQRNBN", "RKQBRNBN", "RKQRNBBN", "RKQRNNBB",  # 906
    "BBRKRQNN", "BRKBRQNN", "BRKRQBNN", "BRKRQNNB", "RBBKRQNN", "RKBBRQNN",  # 912
    "RKBRQBNN", "RKBRQNNB", "RBKRBQNN", "RKRBBQNN", "RKRQBBNN", "RKRQBNNB",  # 918
    "RBKRQNBN", "RKRBQNBN", "RKRQNBBN", "RKRQNNBB", "BBRKRNQN", "BRKBRNQN",  # 924
    "BRKRNBQN", "BRKRNQNB", "RBBKRNQN", "RKBBRNQN", "RKBRNBQN", "RKBRNQNB",  # 930
    "RBKRBNQN", "RKRBBNQN", "RKRNBBQN", "RKRNBQNB", "RBKRNQBN", "RKRBNQBN",  # 936
    "RKRNQBBN", "RKRNQNBB", "BBRKRNNQ", "BRKBRNNQ", "BRKRNBNQ", "BRKRNNQB",  # 942
    "RBBKRNNQ", "RKBBRNNQ", "RKBRNBNQ", "RKBRNNQB", "RBKRBNNQ", "RKRBBNNQ",  # 948
    "RKRNBBNQ", "RKRNBNQB", "RBKRNNBQ", "RKRBNNBQ", "RKRNNBBQ", "RKRNNQBB",  # 954
)
# fmt: on

_IDS: Final = {text: identifier for identifier, text in enumerate(POSITIONS)}


def arrangement_at(identifier: object) -> Arrangement | None:
    """Table entry for ``identifier``, or ``None`` if it is not in 0–959."""
    if not is_valid_id(identifier):
        return None
    return Arrangement.from_string(POSITIONS[identifier])  # type: ignore[index]


def id_of(arrangement: object) -> int | None:
    """Table index of ``arrangement``, or ``None`` if it is not listed."""
    pieces = coerce_pieces(arrangement)
    if pieces is None:
        return None
    return _IDS.get("".join(p.char for p in pieces))
