"""Shared test fixtures."""

import textwrap

import pytest

VAULT_SOURCE = textwrap.dedent('''\
    // SPDX-License-Identifier: MIT
    pragma solidity ^0.8.20;

    import "./Ownable.sol";

    /// @custom:interface build ../interfaces/IVault.sol
    /// @custom:interface copyright "Copyright 2025 Example"
    /// @custom:interface import "./IOwnable.sol"
    /// @custom:interface replace Ownable with IOwnable
    /// @custom:interface remove Pausable
    /// @custom:interface exclude emergencyWithdraw
    /// @custom:interface include _preview
    /// @custom:interface getter counter
    /// @custom:interface is IVersioned

    /// @title Vault
    /// @notice Holds deposits
    contract Vault is Ownable, Pausable {
        /// @notice Contract version
        uint256 public constant VERSION = 2;

        uint256 internal counter;

        address public treasury;

        mapping(address => uint256) public balances;

        /// @notice Emitted on deposit
        event Deposited(address indexed account, uint256 amount);

        /// @notice Thrown when amount is zero
        error ZeroAmount();

        /**
         * @notice Deposit funds
         * @param amount The amount
         */
        function deposit(uint256 amount) external payable {
            if (amount == 0) revert ZeroAmount();
            balances[msg.sender] += amount;
            emit Deposited(msg.sender, amount);
        }

        /// @notice Owner of the vault
        function ownerContract() public view returns (Ownable) {
            return Ownable(address(this));
        }

        function emergencyWithdraw() external {
            counter = 0;
        }

        function _preview(
            uint256 amount,
            Ownable target
        ) internal pure returns (uint256) {
            return amount;
        }

        function _hidden() internal {
        }
    }
''')

VAULT_INTERFACE = textwrap.dedent('''\
    // SPDX-License-Identifier: MIT
    pragma solidity ^0.8.20;

    // Copyright 2025 Example

    import "./IOwnable.sol";

    /// @title Vault
    /// @notice Holds deposits
    interface IVault is IOwnable, IVersioned {

        /// @notice Emitted on deposit
        event Deposited(address indexed account, uint256 amount);

        /// @notice Thrown when amount is zero
        error ZeroAmount();

        /// @notice Contract version
        function VERSION() external pure returns (uint256);
        function counter() external view returns (uint256);
        function treasury() external view returns (address);
        function balances(address key) external view returns (uint256);

        /**
        * @notice Deposit funds
        * @param amount The amount
        */
        function deposit(uint256 amount) external payable;
        /// @notice Owner of the vault
        function ownerContract() external view returns (IOwnable);
        function _preview(uint256 amount, IOwnable target) external pure returns (uint256);
    }
''')


@pytest.fixture
def vault_source():
    """Contract source exercising every directive kind."""
    return VAULT_SOURCE


@pytest.fixture
def vault_interface():
    """Expected interface for ``vault_source``."""
    return VAULT_INTERFACE


@pytest.fixture
def contracts_dir(tmp_path):
    """A contracts/ directory with the vault contract written into it."""
    root = tmp_path / "contracts"
    root.mkdir()
    (root / "Vault.sol").write_text(VAULT_SOURCE)
    return root
