"""Tests for chain cloning."""

import numpy as np
import pytest

from hydrakit.core.chain import Chain, osc, solid
from hydrakit.core.clone import clone_chain
from hydrakit.core.tagged import TaggedSequence
from hydrakit.errors import InvalidInput


class TestCloneStructure:
    def test_same_operators(self, simple_chain):
        cloned = clone_chain(simple_chain)
        assert cloned.operator_names == ["osc", "rotate", "color"]
        assert len(cloned) == len(simple_chain)

    def test_new_chain_object(self, simple_chain):
        cloned = clone_chain(simple_chain)
        assert cloned is not simple_chain
        assert cloned.nodes is not simple_chain.nodes
        for a, b in zip(cloned.nodes, simple_chain.nodes):
            assert a is not b
            assert a.args is not b.args

    def test_definitions_shared(self, simple_chain):
        cloned = clone_chain(simple_chain)
        for a, b in zip(cloned.nodes, simple_chain.nodes):
            assert a.definition is b.definition

    def test_chain_config_shared(self):
        uniforms = {"time": 0.0}
        context = object()
        chain = Chain(nodes=osc().nodes, output="o1", uniforms=uniforms, context=context)
        cloned = clone_chain(chain)
        assert cloned.output == "o1"
        assert cloned.uniforms is uniforms
        assert cloned.context is context

    def test_extending_clone_leaves_source(self, simple_chain):
        cloned = clone_chain(simple_chain)
        cloned.invert().saturate(0)
        assert len(simple_chain) == 3
        assert len(cloned) == 5

    def test_extending_source_leaves_clone(self, simple_chain):
        cloned = clone_chain(simple_chain)
        simple_chain.invert()
        assert len(cloned) == 3


class TestCloneArguments:
    def test_list_argument_independent(self, simple_chain):
        cloned = clone_chain(simple_chain)
        cloned.nodes[1].args[0].append(3)
        assert simple_chain.nodes[1].args[0] == [0, 1, 2]

        simple_chain.nodes[1].args[0][0] = 99
        assert cloned.nodes[1].args[0][0] == 0

    def test_list_elements_shared(self):
        marker = object()
        chain = osc().rotate([marker])
        cloned = clone_chain(chain)
        assert cloned.nodes[1].args[0][0] is marker

    def test_tagged_argument_keeps_metadata(self, simple_chain):
        cloned = clone_chain(simple_chain)
        arg = cloned.nodes[2].args[0]
        original = simple_chain.nodes[2].args[0]
        assert isinstance(arg, TaggedSequence)
        assert arg is not original
        assert arg.attrs == {"_speed": 2}

        arg.fast(5)
        assert original.attrs["_speed"] == 2

    def test_callable_shared(self, simple_chain, live_param):
        cloned = clone_chain(simple_chain)
        assert cloned.nodes[0].args[2] is live_param
        assert cloned.nodes[0].args[2] is simple_chain.nodes[0].args[2]

    def test_scalars_copied(self, simple_chain):
        cloned = clone_chain(simple_chain)
        assert cloned.nodes[0].args[:2] == [10, 0.1]
        assert cloned.nodes[2].args[1:] == [0, 1]

    def test_array_argument_independent(self):
        values = np.array([0.1, 0.2])
        chain = osc().rotate(values)
        cloned = clone_chain(chain)
        cloned.nodes[1].args[0][0] = 5.0
        assert values[0] == pytest.approx(0.1)


class TestNestedClone:
    def test_nested_chain_recursively_cloned(self, nested_chain, simple_chain):
        cloned = clone_chain(nested_chain)
        inner = cloned.nodes[1].args[0]
        assert isinstance(inner, Chain)
        assert inner is not simple_chain
        assert inner.operator_names == simple_chain.operator_names

    def test_nested_list_independent(self, nested_chain, simple_chain):
        cloned = clone_chain(nested_chain)
        inner = cloned.nodes[1].args[0]
        inner.nodes[1].args[0].append(7)
        assert simple_chain.nodes[1].args[0] == [0, 1, 2]

    def test_nested_extension_independent(self, nested_chain, simple_chain):
        cloned = clone_chain(nested_chain)
        cloned.nodes[1].args[0].invert()
        assert len(simple_chain) == 3

    def test_nested_callable_shared(self, nested_chain, live_param):
        cloned = clone_chain(nested_chain)
        assert cloned.nodes[1].args[0].nodes[0].args[2] is live_param

    def test_self_combination(self):
        """A source added to a rotated copy of itself keeps two distinct chains."""
        base = solid(1, 0, 0)
        combined = base.add(clone_chain(base).rotate(1))
        other = combined.nodes[1].args[0]
        assert other is not combined
        assert other.operator_names == ["solid", "rotate"]
        assert combined.operator_names == ["solid", "add"]


class TestCloneValidation:
    @pytest.mark.parametrize("value", [None, 3, "osc", [1, 2], {"nodes": []}])
    def test_rejects_non_chains(self, value):
        with pytest.raises(InvalidInput):
            clone_chain(value)

    def test_rejects_chain_without_nodes(self):
        chain = osc()
        chain.nodes = None
        with pytest.raises(InvalidInput):
            clone_chain(chain)

    def test_nodeless_argument_passed_through(self):
        broken = osc()
        broken.nodes = None
        chain = osc().modulate(broken)
        cloned = clone_chain(chain)
        assert cloned.nodes[1].args[0] is broken

    def test_invalid_input_is_type_error(self):
        with pytest.raises(TypeError):
            clone_chain(42)
