"""Bundled ECDICT assets (ecdict.csv, lemma.en.txt)."""
