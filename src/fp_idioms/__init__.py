"""
fp-idioms — функциональные идиомы на Python

- core: generic map / filter / reduce, замыкания, currying, composition
- demos: две консольные демо-программы
"""
