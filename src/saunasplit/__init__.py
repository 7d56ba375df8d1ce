"""Ядро учёта общих расходов SaunaSplit."""
