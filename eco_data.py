"""Bundled ECO opening tables.

One tab-separated block per ECO volume (A to E) with columns eco, name, pgn.
The pgn column is a mainline in standard algebraic notation, move numbers
included. Volume order is the order entries enter the opening book.

The tables are a curated subset of each volume, not the complete ECO
classification: most named sub-variations (deeper Najdorf or Dragon lines,
for example) are absent and look up as not found.
"""

# fmt: off
TSV_A = """\
eco	name	pgn
A00	Amar Opening	1. Nh3
A00	Anderssen's Opening	1. a3
A00	Barnes Opening	1. f3
A00	Clemenz Opening	1. h3
A00	Durkin Opening	1. Na3
A00	Grob Opening	1. g4
A00	Hungarian Opening	1. g3
A00	Kádas Opening	1. h4
A00	Mieses Opening	1. d3
A00	Polish Opening	1. b4
A00	Saragossa Opening	1. c3
A00	Van Geet Opening	1. Nc3
A00	Van't Kruijs Opening	1. e3
A00	Ware Opening	1. a4
A01	Nimzo-Larsen Attack	1. b3
A02	Bird Opening	1. f4
A02	Bird Opening: From's Gambit	1. f4 e5
A03	Bird Opening: Dutch Variation	1. f4 d5
A04	Zukertort Opening	1. Nf3
A04	Zukertort Opening: Sicilian Invitation	1. Nf3 c5
A05	Zukertort Opening: Quiet System	1. Nf3 Nf6 2. e3
A06	Zukertort Opening	1. Nf3 d5
A07	King's Indian Attack	1. Nf3 d5 2. g3
A09	Réti Opening	1. Nf3 d5 2. c4
A10	English Opening	1. c4
A13	English Opening: Agincourt Defense	1. c4 e6
A15	English Opening: Anglo-Indian Defense	1. c4 Nf6
A20	English Opening: King's English Variation	1. c4 e5
A30	English Opening: Symmetrical Variation	1. c4 c5
A40	Queen's Pawn Game	1. d4
A40	Englund Gambit	1. d4 e5
A41	Queen's Pawn Game	1. d4 d6
A43	Benoni Defense: Old Benoni	1. d4 c5
A45	Indian Defense	1. d4 Nf6
A45	Trompowsky Attack	1. d4 Nf6 2. Bg5
A46	Indian Defense: Knights Variation	1. d4 Nf6 2. Nf3
A48	London System	1. d4 Nf6 2. Nf3 g6 3. Bf4
A51	Indian Defense: Budapest Defense	1. d4 Nf6 2. c4 e5
A56	Benoni Defense	1. d4 Nf6 2. c4 c5
A57	Benko Gambit	1. d4 Nf6 2. c4 c5 3. d5 b5
A80	Dutch Defense	1. d4 f5
A83	Dutch Defense: Staunton Gambit	1. d4 f5 2. e4
A87	Dutch Defense: Leningrad Variation	1. d4 f5 2. c4 Nf6 3. g3 g6 4. Bg2 Bg7 5. Nf3
"""

TSV_B = """\
eco	name	pgn
B00	King's Pawn Game	1. e4
B00	Nimzowitsch Defense	1. e4 Nc6
B00	Owen Defense	1. e4 b6
B00	St. George Defense	1. e4 a6
B01	Scandinavian Defense	1. e4 d5
B01	Scandinavian Defense: Main Line	1. e4 d5 2. exd5 Qxd5 3. Nc3 Qa5
B01	Scandinavian Defense: Modern Variation	1. e4 d5 2. exd5 Nf6
B02	Alekhine Defense	1. e4 Nf6
B03	Alekhine Defense: Four Pawns Attack	1. e4 Nf6 2. e5 Nd5 3. d4 d6 4. c4 Nb6 5. f4
B06	Modern Defense	1. e4 g6
B07	Pirc Defense	1. e4 d6 2. d4 Nf6
B09	Pirc Defense: Austrian Attack	1. e4 d6 2. d4 Nf6 3. Nc3 g6 4. f4
B10	Caro-Kann Defense	1. e4 c6
B12	Caro-Kann Defense: Advance Variation	1. e4 c6 2. d4 d5 3. e5
B13	Caro-Kann Defense: Exchange Variation	1. e4 c6 2. d4 d5 3. exd5 cxd5
B15	Caro-Kann Defense	1. e4 c6 2. d4 d5 3. Nc3
B20	Sicilian Defense	1. e4 c5
B21	Sicilian Defense: Smith-Morra Gambit	1. e4 c5 2. d4 cxd4 3. c3
B22	Sicilian Defense: Alapin Variation	1. e4 c5 2. c3
B23	Sicilian Defense: Closed	1. e4 c5 2. Nc3
B27	Sicilian Defense: Hyperaccelerated Dragon	1. e4 c5 2. Nf3 g6
B30	Sicilian Defense: Old Sicilian	1. e4 c5 2. Nf3 Nc6
B32	Sicilian Defense: Open	1. e4 c5 2. Nf3 Nc6 3. d4 cxd4 4. Nxd4
B40	Sicilian Defense: French Variation	1. e4 c5 2. Nf3 e6
B50	Sicilian Defense: Modern Variations	1. e4 c5 2. Nf3 d6
B70	Sicilian Defense: Dragon Variation	1. e4 c5 2. Nf3 d6 3. d4 cxd4 4. Nxd4 Nf6 5. Nc3 g6
B90	Sicilian Defense: Najdorf Variation	1. e4 c5 2. Nf3 d6 3. d4 cxd4 4. Nxd4 Nf6 5. Nc3 a6
B94	Sicilian Defense: Najdorf Variation	1. e4 c5 2. Nf3 d6 3. d4 cxd4 4. Nxd4 Nf6 5. Nc3 a6 6. Bg5
"""

TSV_C = """\
eco	name	pgn
C00	French Defense	1. e4 e6
C00	French Defense: Knight Variation	1. e4 e6 2. Nf3
C01	French Defense: Exchange Variation	1. e4 e6 2. d4 d5 3. exd5 exd5
C02	French Defense: Advance Variation	1. e4 e6 2. d4 d5 3. e5
C03	French Defense: Tarrasch Variation	1. e4 e6 2. d4 d5 3. Nd2
C11	French Defense: Classical Variation	1. e4 e6 2. d4 d5 3. Nc3 Nf6
C15	French Defense: Winawer Variation	1. e4 e6 2. d4 d5 3. Nc3 Bb4
C20	King's Pawn Game	1. e4 e5
C20	Bongcloud Attack	1. e4 e5 2. Ke2
C20	King's Pawn Game: Wayward Queen Attack	1. e4 e5 2. Qh5
C21	Center Game	1. e4 e5 2. d4 exd4
C21	Danish Gambit	1. e4 e5 2. d4 exd4 3. c3
C23	Bishop's Opening	1. e4 e5 2. Bc4
C25	Vienna Game	1. e4 e5 2. Nc3
C30	King's Gambit	1. e4 e5 2. f4
C33	King's Gambit Accepted	1. e4 e5 2. f4 exf4
C40	Latvian Gambit	1. e4 e5 2. Nf3 f5
C41	Philidor Defense	1. e4 e5 2. Nf3 d6
C42	Petrov's Defense	1. e4 e5 2. Nf3 Nf6
C44	Scotch Game	1. e4 e5 2. Nf3 Nc6 3. d4
C46	Three Knights Opening	1. e4 e5 2. Nf3 Nc6 3. Nc3
C47	Four Knights Game	1. e4 e5 2. Nf3 Nc6 3. Nc3 Nf6
C50	Italian Game	1. e4 e5 2. Nf3 Nc6 3. Bc4
C50	Italian Game: Giuoco Pianissimo	1. e4 e5 2. Nf3 Nc6 3. Bc4 Bc5 4. d3
C51	Italian Game: Evans Gambit	1. e4 e5 2. Nf3 Nc6 3. Bc4 Bc5 4. b4
C55	Italian Game: Two Knights Defense	1. e4 e5 2. Nf3 Nc6 3. Bc4 Nf6
C57	Italian Game: Two Knights Defense, Fried Liver Attack	1. e4 e5 2. Nf3 Nc6 3. Bc4 Nf6 4. Ng5 d5 5. exd5 Nxd5 6. Nxf7
C60	Ruy Lopez	1. e4 e5 2. Nf3 Nc6 3. Bb5
C65	Ruy Lopez: Berlin Defense	1. e4 e5 2. Nf3 Nc6 3. Bb5 Nf6
C68	Ruy Lopez: Exchange Variation	1. e4 e5 2. Nf3 Nc6 3. Bb5 a6 4. Bxc6
C70	Ruy Lopez: Morphy Defense	1. e4 e5 2. Nf3 Nc6 3. Bb5 a6 4. Ba4
C78	Ruy Lopez: Morphy Defense	1. e4 e5 2. Nf3 Nc6 3. Bb5 a6 4. Ba4 Nf6 5. O-O
C89	Ruy Lopez: Marshall Attack	1. e4 e5 2. Nf3 Nc6 3. Bb5 a6 4. Ba4 Nf6 5. O-O Be7 6. Re1 b5 7. Bb3 O-O 8. c3 d5
"""

TSV_D = """\
eco	name	pgn
D00	Queen's Pawn Game	1. d4 d5
D00	Blackmar-Diemer Gambit	1. d4 d5 2. e4 dxe4 3. Nc3 Nf6 4. f3
D01	Richter-Veresov Attack	1. d4 d5 2. Nc3 Nf6 3. Bg5
D02	London System	1. d4 d5 2. Nf3 Nf6 3. Bf4
D02	Queen's Pawn Game: Zukertort Variation	1. d4 d5 2. Nf3
D06	Queen's Gambit	1. d4 d5 2. c4
D07	Queen's Gambit Declined: Chigorin Defense	1. d4 d5 2. c4 Nc6
D08	Queen's Gambit Declined: Albin Countergambit	1. d4 d5 2. c4 e5
D10	Slav Defense	1. d4 d5 2. c4 c6
D10	Slav Defense: Exchange Variation	1. d4 d5 2. c4 c6 3. cxd5 cxd5
D20	Queen's Gambit Accepted	1. d4 d5 2. c4 dxc4
D30	Queen's Gambit Declined	1. d4 d5 2. c4 e6
D35	Queen's Gambit Declined: Exchange Variation	1. d4 d5 2. c4 e6 3. Nc3 Nf6 4. cxd5
D43	Semi-Slav Defense	1. d4 d5 2. c4 e6 3. Nc3 Nf6 4. Nf3 c6
D70	Neo-Grünfeld Defense	1. d4 Nf6 2. c4 g6 3. f3 d5
D80	Grünfeld Defense	1. d4 Nf6 2. c4 g6 3. Nc3 d5
D85	Grünfeld Defense: Exchange Variation	1. d4 Nf6 2. c4 g6 3. Nc3 d5 4. cxd5 Nxd5
"""

TSV_E = """\
eco	name	pgn
E00	Catalan Opening	1. d4 Nf6 2. c4 e6 3. g3
E10	Indian Defense: Anti-Nimzo-Indian	1. d4 Nf6 2. c4 e6 3. Nf3
E11	Bogo-Indian Defense	1. d4 Nf6 2. c4 e6 3. Nf3 Bb4+
E12	Queen's Indian Defense	1. d4 Nf6 2. c4 e6 3. Nf3 b6
E20	Nimzo-Indian Defense	1. d4 Nf6 2. c4 e6 3. Nc3 Bb4
E32	Nimzo-Indian Defense: Classical Variation	1. d4 Nf6 2. c4 e6 3. Nc3 Bb4 4. Qc2
E40	Nimzo-Indian Defense: Normal Variation	1. d4 Nf6 2. c4 e6 3. Nc3 Bb4 4. e3
E60	King's Indian Defense	1. d4 Nf6 2. c4 g6
E61	King's Indian Defense	1. d4 Nf6 2. c4 g6 3. Nc3
E70	King's Indian Defense: Normal Variation	1. d4 Nf6 2. c4 g6 3. Nc3 Bg7 4. e4
E76	King's Indian Defense: Four Pawns Attack	1. d4 Nf6 2. c4 g6 3. Nc3 Bg7 4. e4 d6 5. f4
E80	King's Indian Defense: Sämisch Variation	1. d4 Nf6 2. c4 g6 3. Nc3 Bg7 4. e4 d6 5. f3
E90	King's Indian Defense: Normal Variation	1. d4 Nf6 2. c4 g6 3. Nc3 Bg7 4. e4 d6 5. Nf3
E97	King's Indian Defense: Orthodox Variation, Aronin-Taimanov Defense	1. d4 Nf6 2. c4 g6 3. Nc3 Bg7 4. e4 d6 5. Nf3 O-O 6. Be2 e5 7. O-O Nc6
"""
# fmt: on

TSV_DATA: tuple[str, ...] = (TSV_A, TSV_B, TSV_C, TSV_D, TSV_E)
