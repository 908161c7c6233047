"""
ecoutils: utilitários de domínio da consultoria ambiental

- core.geo: conversão de coordenadas geográficas ↔ projetadas
- core.formatting: máscaras de CPF/CNPJ/telefone e valor por extenso em reais
"""

__version__ = "0.1.0"
