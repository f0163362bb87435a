from concurrent.futures import ThreadPoolExecutor

import pytest

from tracealign.predict import (generate_triplets, codon_usage, coding_potential, CodonError, find_orfs,
                                NoResultsError, GenePredictor, predict, best_match, rank)


class TestCodon:
    def test_generate_triplets(self):
        triplets = generate_triplets()
        assert len(triplets) == 64
        assert len(set(triplets)) == 64
        assert triplets[:5] == ['AAA', 'AAT', 'AAC', 'AAG', 'ATA']
        assert triplets[-1] == 'GGG'

    def test_generate_custom(self):
        assert generate_triplets('AB', 2) == ['AA', 'AB', 'BA', 'BB']

    def test_usage_counts_non_overlapping(self):
        assert codon_usage('AAAAAA', ['AAA']) == {'AAA': 2}
        assert codon_usage('AAAAA', ['AAA', 'CCC']) == {'AAA': 1, 'CCC': 0}

    def test_usage_accepts_patterns(self):
        assert codon_usage('ATCATGATA', ['AT[CG]']) == {'AT[CG]': 2}

    def test_usage_deduplicates(self):
        assert codon_usage('GGG', ['GGG', 'GGG']) == {'GGG': 1}

    def test_invalid_codon(self):
        with pytest.raises(CodonError, match="Invalid codon"):
            codon_usage('ACGT', ['A(C'])
        with pytest.raises(CodonError, match="empty"):
            codon_usage('ACGT', [''])

    def test_pattern_matching_empty_string_rejected(self):
        with pytest.raises(CodonError, match="empty string"):
            codon_usage('ACGT', ['A?'])
        with pytest.raises(CodonError, match="empty string"):
            coding_potential('', ['A*'])

    def test_coding_potential(self):
        assert coding_potential('AAAGGG', ['AAA', 'GGG', 'CCC']) == pytest.approx(0.25)
        # 7 bases leave ceil(7 / 3) = 3 codon slots
        assert coding_potential('AAAGGGC', ['AAA']) == pytest.approx(1 / 3)

    def test_coding_potential_without_usage(self):
        assert coding_potential('TTTTTT', ['AAA', 'GGG']) == 0.0
        assert coding_potential('', ['AAA']) == 0.0


class TestOrf:
    def test_single_orf(self):
        assert find_orfs('CCATGAAATAGCC', (6, -1)) == ['ATGAAATAG']

    def test_every_stop_is_paired(self):
        assert find_orfs('ATGAAATAGTAA', (6, -1)) == ['ATGAAATAG', 'ATGAAATAGTAA']
        assert find_orfs('ATGAAATAGTAA', (6, None)) == ['ATGAAATAG', 'ATGAAATAGTAA']

    def test_maximum_is_exclusive(self):
        assert find_orfs('ATGAAATAGTAA', (6, 12)) == ['ATGAAATAG']
        with pytest.raises(NoResultsError):
            find_orfs('CCATGAAATAGCC', (6, 9))

    def test_start_too_close_to_end(self):
        # 0 + 6 + 3 > 6: the start codon is skipped before stops are considered
        with pytest.raises(NoResultsError, match="between"):
            find_orfs('ATGTAA', (6, -1))

    def test_no_start_codon(self):
        with pytest.raises(NoResultsError, match="start codon"):
            find_orfs('CCCTAACCC', (3, -1))

    def test_no_stop_codon(self):
        with pytest.raises(NoResultsError, match="stop codons"):
            find_orfs('CCATGCCCC', (3, -1))

    def test_no_results_is_not_a_value_error(self):
        assert not issubclass(NoResultsError, ValueError)
        assert issubclass(NoResultsError, LookupError)


class TestPredictor:
    GENOME = 'CCATGAAATAGCC'

    def test_interior(self):
        assert GenePredictor('ATGAAATAG').interior == 'AAA'

    def test_predict_coding_potential(self):
        (prediction,) = predict(self.GENOME, (6, -1), ['AAA'])
        assert prediction.sequence == 'ATGAAATAG'
        assert prediction.coding_potential == pytest.approx(1.0)
        assert prediction.transcript_match is None
        assert prediction.alignment is None

    def test_predict_default_codons(self):
        (prediction,) = predict(self.GENOME, (6, -1))
        assert prediction.coding_potential == pytest.approx(1.0)

    def test_predict_with_references(self):
        references = [('ref1', 'TTTT'), ('ref2', 'ATGAAA')]
        (prediction,) = predict(self.GENOME, (6, -1), ['AAA'], references)
        assert prediction.transcript_match == 'ref2'
        assert prediction.transcript_distance == 6
        assert prediction.alignment.aligned_b == ['...ATGAAA...']

    def test_predict_with_executor(self):
        genome = 'ATGAAATAGTAACCATGCCCTGA'
        references = [('ref1', 'ATGCCC'), ('ref2', 'AAATAG')]
        with ThreadPoolExecutor(2) as executor:
            threaded = predict(genome, (6, -1), None, references, executor=executor)
        assert threaded == predict(genome, (6, -1), None, references)

    def test_predict_empty_interior(self):
        (prediction,) = predict('ATGTAACCC', (6, -1), ['AAA'])
        assert prediction.interior == ''
        assert prediction.coding_potential == 0.0
        with pytest.raises(CodonError, match="empty string"):
            predict('ATGTAACCC', (6, -1), ['A?'])

    def test_predict_no_orfs(self):
        with pytest.raises(NoResultsError):
            predict('CCCCCC', (6, -1))

    def test_best_match_keeps_first_on_tie(self):
        identifier, alignment = best_match('ACGT', [('x', 'ACGT'), ('y', 'ACGT')])
        assert identifier == 'x'
        assert alignment.score == 4

    def test_best_match_without_references(self):
        assert best_match('ACGT', []) == (None, None)

    def test_rank(self):
        a = GenePredictor('A', coding_potential=0.5, transcript_distance=1)
        b = GenePredictor('B', coding_potential=0.9, transcript_distance=1)
        c = GenePredictor('C', coding_potential=0.1, transcript_distance=3)
        d = GenePredictor('D', coding_potential=0.5, transcript_distance=1)
        assert [p.sequence for p in rank([a, b, c, d])] == ['C', 'B', 'A', 'D']
