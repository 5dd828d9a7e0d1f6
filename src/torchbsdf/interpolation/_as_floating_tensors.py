from typing import List, Union

import torch
from torch import Tensor


def as_floating_tensors(*values: Union[Tensor, float]) -> List[Tensor]:
    """Convert scalars and tensors to tensors of one promoted floating dtype."""
    tensors = [torch.as_tensor(value) for value in values]

    target_dtype = tensors[0].dtype
    for t in tensors[1:]:
        target_dtype = torch.promote_types(target_dtype, t.dtype)
    if not target_dtype.is_floating_point:
        target_dtype = torch.get_default_dtype()

    return [t if t.dtype == target_dtype else t.to(target_dtype) for t in tensors]
