"""Configuração do SDK (settings e logging)."""
