"""
诊断目录：只读参考数据，code → Diagnosis。

只给展示层查名字用；Entry 的 diagnosisCodes 不和这里交叉校验。
"""

from typing import Optional

from .intake.types import Diagnosis

_DIAGNOSES = [
    Diagnosis(code="M24.2", name="Disorder of ligament", latin="Morbositas ligamenti"),
    Diagnosis(code="M51.2", name="Other specified intervertebral disc displacement",
              latin="Alia dislocatio disci intervertebralis specificata"),
    Diagnosis(code="S03.5", name="Sprain and strain of joints and ligaments of other and unspecified parts of head",
              latin="Distorsio et/sive dilatatio articulationum et/sive ligamentorum partium aliarum sive non specificatarum capitis"),
    Diagnosis(code="J10.1", name="Influenza with other respiratory manifestations, other influenza virus codeentified",
              latin="Influenza cum aliis manifestationibus respiratoriis ab agente virali codeentificato"),
    Diagnosis(code="J06.9", name="Acute upper respiratory infection, unspecified",
              latin="Infectio acuta respiratoria superior non specificata"),
    Diagnosis(code="Z57.1", name="Occupational exposure to radiation"),
    Diagnosis(code="N30.0", name="Acute cystitis", latin="Cystitis acuta"),
    Diagnosis(code="H54.7", name="Unspecified visual loss", latin="Amblyopia NAS"),
    Diagnosis(code="J03.0", name="Streptococcal tonsillitis", latin="Tonsillitis (palatina) streptococcica"),
    Diagnosis(code="L60.1", name="Onycholysis", latin="Onycholysis"),
    Diagnosis(code="Z74.3", name="Need for continuous supervision"),
    Diagnosis(code="L20", name="Atopic dermatitis", latin="Atopic dermatitis"),
    Diagnosis(code="F43.2", name="Adjustment disorders", latin="Perturbationes adaptationis"),
    Diagnosis(code="S62.5", name="Fracture of thumb", latin="Fractura [ossis/ossium] pollicis"),
    Diagnosis(code="H35.29", name="Other proliferative retinopathy", latin="Alia retinopathia proliferativa"),
]


class DiagnosisCatalog:
    """按插入顺序保存的只读目录。"""

    def __init__(self, diagnoses=None):
        self._by_code = {d.code: d for d in (diagnoses if diagnoses is not None else _DIAGNOSES)}

    def lookup(self, code: str) -> Optional[Diagnosis]:
        return self._by_code.get(code)

    def all(self) -> list[Diagnosis]:
        return list(self._by_code.values())

    def __contains__(self, code) -> bool:
        return code in self._by_code

    def __len__(self) -> int:
        return len(self._by_code)


catalog = DiagnosisCatalog()
