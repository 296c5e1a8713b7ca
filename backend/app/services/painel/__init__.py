"""
Orquestração do painel: carga dos pedidos e montagem das visões
"""
